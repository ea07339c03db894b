"""Host collaborator protocols and an in-memory implementation."""

from .memory import BufferRecord, InMemoryHost
from .protocols import (
    BufferHandle,
    BufferRegistry,
    CapabilityProbe,
    CommandRunner,
    EchoChunk,
    MessageSink,
)

__all__ = [
    "BufferHandle",
    "BufferRegistry",
    "CapabilityProbe",
    "CommandRunner",
    "EchoChunk",
    "MessageSink",
    "BufferRecord",
    "InMemoryHost",
]
