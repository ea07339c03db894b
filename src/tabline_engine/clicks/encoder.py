"""Wraps rendered tab labels in clickable markup."""

from __future__ import annotations

from typing import Optional

from tabline_engine.config import EncoderOptions, InteractionMode
from tabline_engine.host.protocols import BufferHandle, CapabilityProbe
from tabline_engine.runtime import telemetry

from .grammar import MarkupGrammar, VimTablineGrammar
from .models import ClickRegion, RenderContext


class ClickRegionBuilder:
    """Collects the parts of a click region and validates them on ``build``."""

    def __init__(self, options: Optional[EncoderOptions] = None) -> None:
        self.options = options or EncoderOptions()
        self._buffer_id: BufferHandle | None = None
        self._mode = InteractionMode.SINGLE_WINDOW
        self._label = ""

    def for_buffer(self, buffer_id: BufferHandle) -> "ClickRegionBuilder":
        self._buffer_id = buffer_id
        return self

    def in_mode(self, mode: InteractionMode | str) -> "ClickRegionBuilder":
        self._mode = InteractionMode.parse(mode)
        return self

    def with_label(self, label: str) -> "ClickRegionBuilder":
        self._label = label
        return self

    def build(self) -> ClickRegion:
        return ClickRegion(
            buffer_id=self._buffer_id,  # type: ignore[arg-type]
            namespace=self.options.namespace,
            handler=self.options.handler_for(self._mode),
            label=self._label,
        )


class ClickRegionEncoder:
    """Produces click-dispatch markup for a tab, or the bare label.

    The host capability is read on every call; a probe that raises counts as
    "unsupported" so the tab line still renders.
    """

    def __init__(
        self,
        capabilities: CapabilityProbe,
        *,
        grammar: Optional[MarkupGrammar] = None,
        options: Optional[EncoderOptions] = None,
        logger_name: str | None = None,
    ) -> None:
        self._capabilities = capabilities
        self.grammar: MarkupGrammar = grammar or VimTablineGrammar()
        self.options = options or EncoderOptions()
        self._logger_name = logger_name

    def clickable(self) -> bool:
        try:
            return bool(self._capabilities.supports_clickable_tabs())
        except Exception as exc:
            telemetry.record_event(
                "clicks.capability_error",
                level="warning",
                data={"error": repr(exc)},
                logger_name=self._logger_name,
            )
            return False

    def region_for(self, context: RenderContext) -> ClickRegion:
        return (
            ClickRegionBuilder(self.options)
            .for_buffer(context.buffer_id)
            .in_mode(context.mode)
            .with_label(context.label)
            .build()
        )

    def encode(self, context: RenderContext) -> str:
        if not self.clickable():
            return self.grammar.plain(context.label)
        return self.grammar.render(self.region_for(context))

    __call__ = encode


def make_clickable(
    context: RenderContext,
    capabilities: CapabilityProbe,
    *,
    grammar: Optional[MarkupGrammar] = None,
) -> str:
    return ClickRegionEncoder(capabilities, grammar=grammar).encode(context)


__all__ = ["ClickRegionBuilder", "ClickRegionEncoder", "make_clickable"]
