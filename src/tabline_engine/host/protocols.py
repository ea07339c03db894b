"""Protocols describing what the engine needs from its editor host."""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple

BufferHandle = int
EchoChunk = Tuple[str, str]  # (text, highlight group)


class BufferRegistry(Protocol):
    """Read-only view of the buffers the host currently manages."""

    def list_all_buffers(self) -> Sequence[BufferHandle]:
        """Return every buffer handle known to the host, in host order."""
        ...

    def buffer_exists(self, handle: BufferHandle) -> bool:
        """Whether ``handle`` still refers to a live buffer."""
        ...

    def is_listed(self, handle: BufferHandle) -> bool:
        """Whether the buffer should appear in buffer/tab lists."""
        ...


class CapabilityProbe(Protocol):
    def supports_clickable_tabs(self) -> bool:
        """Whether the host tab line can dispatch clicks to named handlers."""
        ...


class MessageSink(Protocol):
    def echo(self, chunks: Sequence[EchoChunk], history: bool) -> None:
        """Write highlighted chunks to the host message area."""
        ...


class CommandRunner(Protocol):
    def command(self, text: str) -> None:
        """Execute a single Ex command on the host."""
        ...
