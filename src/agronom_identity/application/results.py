"""Operation results and the boundary that turns failures into tagged results.

Commands return ``AccountResult`` or raise an ``IdentityError``. Callers that
need a payload instead of exceptions (a CLI, an HTTP handler) wrap the call
in ``run_operation``:

    result = await run_operation(directory.register("a@b.com", "secret1"))
    if result.success:
        ...
    result.to_dict()  # {"success": True, "accountId": 1}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Optional

from agronom_identity.exceptions import IdentityError, InternalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountResult:
    """Success payload of every account operation."""

    account_id: int
    created: bool = False


@dataclass(frozen=True)
class OperationResult:
    """Tagged outcome of an account operation."""

    success: bool
    account_id: Optional[int] = None
    created: bool = False
    error_code: Optional[str] = None
    message: Optional[str] = None
    field: Optional[str] = None
    retryable: bool = False

    @classmethod
    def ok(cls, result: AccountResult) -> OperationResult:
        return cls(success=True, account_id=result.account_id, created=result.created)

    @classmethod
    def failure(cls, error: IdentityError) -> OperationResult:
        return cls(
            success=False,
            error_code=error.code,
            message=error.message,
            field=getattr(error, "field", None),
            retryable=getattr(error, "retryable", False),
        )

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {
                "success": True,
                "accountId": self.account_id,
                "created": self.created,
            }

        payload: dict[str, Any] = {
            "success": False,
            "error": self.error_code,
            "message": self.message,
        }
        if self.field is not None:
            payload["field"] = self.field
        if self.retryable:
            payload["retryable"] = True
        return payload


async def run_operation(operation: Awaitable[AccountResult]) -> OperationResult:
    """Await an account operation and convert its failure into a result.

    Internal faults are logged here with their chained cause; expected
    failures (bad input, wrong password, duplicates) are not faults.
    """
    try:
        result = await operation
    except InternalError as e:
        logger.error("Account operation failed: %s", e.message, exc_info=e)
        return OperationResult.failure(e)
    except IdentityError as e:
        logger.debug("Account operation rejected: %s", e.code)
        return OperationResult.failure(e)

    return OperationResult.ok(result)
