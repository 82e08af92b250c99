"""Domain errors — caller contract violations."""

from __future__ import annotations

from typing import Any

from rpc_observability.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError, ValueError):
    """An argument is illegal for the requested operation.

    Raised synchronously by the record assembler, e.g. when a peer address
    is supplied from the wrong side of a call.
    """

    default_code = "invalid_argument"

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any) -> None:
        errors = [{"field": argument, "message": message}] if argument else None
        super().__init__(message, errors=errors, **kwargs)
        self.argument = argument


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
