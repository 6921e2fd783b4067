"""Infrastructure adapters (persistence)."""
