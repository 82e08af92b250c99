"""Infrastructure errors — log backend integration failures."""

from __future__ import annotations

from typing import Any

from rpc_observability.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a caller contract violation."""

    default_code = "infrastructure_error"


class SinkError(InfrastructureError):
    """A log sink backend could not be created or reached."""

    default_code = "sink_error"

    def __init__(
        self,
        sink: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Log sink '{sink}' is unavailable", **kwargs)
        self.sink = sink

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["sink"] = self.sink
        return base


__all__ = ["InfrastructureError", "SinkError"]
