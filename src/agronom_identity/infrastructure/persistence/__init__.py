"""Persistence implementations for agronom_identity."""
