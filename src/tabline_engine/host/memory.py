"""In-memory host used by tests and the Textual demo."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from .protocols import BufferHandle, EchoChunk


@dataclass(slots=True)
class BufferRecord:
    handle: BufferHandle
    name: str = ""
    listed: bool = True


class InMemoryHost:
    """Implements every host protocol over plain Python state.

    ``calls`` records each registry/capability query as ``(method, arg)`` so
    callers can assert which lookups actually reached the host.
    """

    def __init__(self, *, clickable: bool = True) -> None:
        self._buffers: Dict[BufferHandle, BufferRecord] = {}
        self._next_handle = 1
        self.clickable = clickable
        self.calls: List[Tuple[str, object]] = []
        self.echoed: List[Tuple[Tuple[EchoChunk, ...], bool]] = []
        self.commands: List[str] = []

    def add_buffer(self, name: str = "", *, listed: bool = True) -> BufferHandle:
        handle = self._next_handle
        self._next_handle += 1
        self._buffers[handle] = BufferRecord(handle=handle, name=name, listed=listed)
        return handle

    def wipe(self, handle: BufferHandle) -> None:
        self._buffers.pop(handle, None)

    def set_listed(self, handle: BufferHandle, listed: bool) -> None:
        self._buffers[handle].listed = listed

    def buffer_name(self, handle: BufferHandle) -> str:
        record = self._buffers.get(handle)
        return record.name if record else ""

    # BufferRegistry

    def list_all_buffers(self) -> Sequence[BufferHandle]:
        self.calls.append(("list_all_buffers", None))
        return list(self._buffers)

    def buffer_exists(self, handle: BufferHandle) -> bool:
        self.calls.append(("buffer_exists", handle))
        return handle in self._buffers

    def is_listed(self, handle: BufferHandle) -> bool:
        self.calls.append(("is_listed", handle))
        record = self._buffers.get(handle)
        return bool(record and record.listed)

    # CapabilityProbe

    def supports_clickable_tabs(self) -> bool:
        self.calls.append(("supports_clickable_tabs", None))
        return self.clickable

    # MessageSink / CommandRunner

    def echo(self, chunks: Sequence[EchoChunk], history: bool) -> None:
        self.echoed.append((tuple(chunks), history))

    def command(self, text: str) -> None:
        self.commands.append(text)

    def reset_calls(self) -> None:
        self.calls.clear()


__all__ = ["BufferRecord", "InMemoryHost"]
