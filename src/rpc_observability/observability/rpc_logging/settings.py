"""RPC logging – RpcLoggingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from rpc_observability.config.settings import Settings
from rpc_observability.config.validation import InvalidSettingValueError

DEFAULT_LOG_NAME = "grpc"
DEFAULT_SERVICE_TO_EXCLUDE = "google.logging.v2.LoggingServiceV2"


@dataclasses.dataclass
class RpcLoggingSettings(Settings):
    """Settings for the record assembler and the bundled cloud sink.

    Loaded from ``RPC_LOG_*`` environment variables by
    :class:`~rpc_observability.config.settings.EnvSettingsLoader`.
    ``project_id=None`` lets the logging client resolve its ambient project.
    The byte ceilings are unset by default: payloads are accounted exactly and
    never truncated.
    """

    _prefix: ClassVar[str] = "RPC_LOG"

    project_id: str | None = None
    log_name: str = DEFAULT_LOG_NAME
    service_to_exclude: str = DEFAULT_SERVICE_TO_EXCLUDE
    max_metadata_bytes: int | None = None
    max_message_bytes: int | None = None

    def _validate(self) -> None:
        if not self.log_name:
            raise InvalidSettingValueError("log_name", self.log_name, "must not be empty")
        for name in ("max_metadata_bytes", "max_message_bytes"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidSettingValueError(name, value, "must not be negative")


__all__ = ["DEFAULT_LOG_NAME", "DEFAULT_SERVICE_TO_EXCLUDE", "RpcLoggingSettings"]
