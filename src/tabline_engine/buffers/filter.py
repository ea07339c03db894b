"""Selects the buffers that are allowed to appear in the tab line."""

from __future__ import annotations

from typing import Iterable, Optional

from tabline_engine.host.protocols import BufferHandle, BufferRegistry
from tabline_engine.runtime.telemetry import span


def is_positive_handle(handle: object) -> bool:
    # bool is an int subclass but never a buffer handle
    return isinstance(handle, int) and not isinstance(handle, bool) and handle > 0


def is_valid(registry: BufferRegistry, handle: object) -> bool:
    """Whether ``handle`` names a live, listed buffer.

    Non-positive handles are rejected before the host is consulted, and the
    listed flag is only read for buffers that still exist.
    """

    if not is_positive_handle(handle):
        return False
    return registry.buffer_exists(handle) and registry.is_listed(handle)  # type: ignore[arg-type]


class BufferValidityFilter:
    """Order-preserving filter over a snapshot of host buffers."""

    def __init__(
        self, registry: BufferRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def filter(
        self, candidates: Optional[Iterable[BufferHandle]] = None
    ) -> list[BufferHandle]:
        with span(
            "buffers::filter",
            logger_name=self._logger_name,
            component="buffers",
            metadata={"source": "caller" if candidates is not None else "host"},
        ) as handle:
            if candidates is None:
                candidates = self._registry.list_all_buffers()
            snapshot = list(candidates)
            valid = [buf for buf in snapshot if is_valid(self._registry, buf)]
            handle.add_metadata("candidate_count", len(snapshot))
            handle.add_metadata("valid_count", len(valid))
            return valid

    __call__ = filter


def get_valid_buffers(
    registry: BufferRegistry, candidates: Optional[Iterable[BufferHandle]] = None
) -> list[BufferHandle]:
    return BufferValidityFilter(registry).filter(candidates)


__all__ = [
    "BufferValidityFilter",
    "get_valid_buffers",
    "is_positive_handle",
    "is_valid",
]
