"""RPC logging – header metadata and message bytes to structured payloads.

Both codecs report the exact number of bytes they embed.  Neither shrinks the
payload unless the caller passes a ``max_bytes`` ceiling:

* metadata: entries that would push the running total past the ceiling are
  dropped whole (an entry is never split);
* messages: the bytes are cut at the ceiling.

``PayloadBuilder.size`` always equals the bytes actually embedded and
``truncated`` records whether anything was dropped.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Generic, TypeVar

from rpc_observability.kernel.errors import InvalidArgumentError
from rpc_observability.observability.rpc_logging.record import Metadata, MetadataEntry

T = TypeVar("T")

MetadataValue = str | bytes
MetadataLike = Mapping[str, MetadataValue] | Iterable[tuple[str, MetadataValue]]


@dataclasses.dataclass(frozen=True, slots=True)
class PayloadBuilder(Generic[T]):
    """A structured payload paired with its byte accounting."""

    payload: T
    size: int
    truncated: bool = False


def _check_ceiling(max_bytes: int | None) -> None:
    if max_bytes is not None and max_bytes < 0:
        raise InvalidArgumentError(f"max_bytes must not be negative, got {max_bytes}", argument="max_bytes")


def _as_bytes(value: MetadataValue) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return value.encode("utf-8")


def _iter_entries(metadata: MetadataLike | None) -> Iterable[tuple[str, MetadataValue]]:
    if metadata is None:
        return ()
    if isinstance(metadata, Mapping):
        return metadata.items()
    return metadata


def metadata_to_structured(
    metadata: MetadataLike | None,
    max_bytes: int | None = None,
) -> PayloadBuilder[Metadata]:
    """Copy header entries, in caller order, into a :class:`Metadata` payload.

    Each entry contributes ``len(key.encode()) + len(value_bytes)`` to the
    size.  ``str`` values are UTF-8 encoded, binary values are copied as-is.
    """
    _check_ceiling(max_bytes)
    entries: list[MetadataEntry] = []
    size = 0
    truncated = False
    for key, value in _iter_entries(metadata):
        raw = _as_bytes(value)
        entry_size = len(key.encode("utf-8")) + len(raw)
        if max_bytes is not None and size + entry_size > max_bytes:
            truncated = True
            continue
        entries.append(MetadataEntry(key=key, value=raw))
        size += entry_size
    return PayloadBuilder(Metadata(entry=tuple(entries)), size, truncated)


def message_to_structured(
    message: bytes | bytearray | memoryview,
    max_bytes: int | None = None,
) -> PayloadBuilder[bytes]:
    """Wrap raw message bytes; size is ``len(message)`` unless truncated."""
    _check_ceiling(max_bytes)
    data = bytes(message)
    if max_bytes is not None and len(data) > max_bytes:
        return PayloadBuilder(data[:max_bytes], max_bytes, True)
    return PayloadBuilder(data, len(data))


__all__ = [
    "MetadataLike",
    "PayloadBuilder",
    "message_to_structured",
    "metadata_to_structured",
]
