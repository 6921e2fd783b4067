"""Application layer: account commands, the directory facade and results."""

from agronom_identity.application.results import (
    AccountResult,
    OperationResult,
    run_operation,
)
from agronom_identity.application.services import AccountDirectory

__all__ = [
    "AccountDirectory",
    "AccountResult",
    "OperationResult",
    "run_operation",
]
