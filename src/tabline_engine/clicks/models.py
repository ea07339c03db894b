"""Value objects passed through the click-region pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from tabline_engine.config import InteractionMode
from tabline_engine.host.protocols import BufferHandle


class MarkupError(ValueError):
    """Raised when a click region cannot be expressed in the host grammar."""

    def __init__(self, message: str, *, buffer_id: object | None = None) -> None:
        super().__init__(message)
        self.buffer_id = buffer_id


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Per-tab, per-pass input to the encoder."""

    mode: InteractionMode | str
    buffer_id: BufferHandle
    label: str

    @property
    def interaction_mode(self) -> InteractionMode:
        return InteractionMode.parse(self.mode)


@dataclass(frozen=True, slots=True)
class ClickRegion:
    """A label tagged with the buffer id and the handler a click dispatches to.

    ``namespace`` and ``handler`` come from ``EncoderOptions``, which already
    restricts them to identifiers; only the buffer id is checked here.
    """

    buffer_id: BufferHandle
    namespace: str
    handler: str
    label: str

    def __post_init__(self) -> None:
        if (
            not isinstance(self.buffer_id, int)
            or isinstance(self.buffer_id, bool)
            or self.buffer_id < 1
        ):
            raise MarkupError(
                f"Click regions need a positive buffer id, got {self.buffer_id!r}",
                buffer_id=self.buffer_id,
            )

    @property
    def tag(self) -> str:
        return str(self.buffer_id)


__all__ = ["ClickRegion", "MarkupError", "RenderContext"]
