"""Tab-line pipeline that feeds encoded tabs into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, cast

from tabline_engine.buffers import BufferValidityFilter, is_valid
from tabline_engine.clicks import ClickRegionEncoder, MarkupGrammar, RenderContext
from tabline_engine.config import InteractionMode, TablineOptions
from tabline_engine.host.protocols import BufferHandle, BufferRegistry, CapabilityProbe
from tabline_engine.runtime import telemetry


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


def _default_label(buffer_id: BufferHandle) -> str:
    return f"buffer {buffer_id}"


@dataclass(slots=True)
class TablineHooks:
    """Callbacks the controller uses to reach the UI."""

    update_tabline: Callable[[str], None]
    label_for: Callable[[BufferHandle], str] = _default_label
    on_select: Callable[[BufferHandle, InteractionMode], None] = _noop
    log: Callable[[str], None] = _noop


class TablineController:
    """Recomputes the visible tabs on every pass and routes clicks back."""

    def __init__(
        self,
        registry: BufferRegistry,
        hooks: TablineHooks,
        *,
        capabilities: Optional[CapabilityProbe] = None,
        options: Optional[TablineOptions] = None,
        grammar: Optional[MarkupGrammar] = None,
    ) -> None:
        if capabilities is None:
            if not callable(getattr(registry, "supports_clickable_tabs", None)):
                raise TypeError(
                    "registry does not implement supports_clickable_tabs(); "
                    "pass `capabilities` explicitly"
                )
            capabilities = cast(CapabilityProbe, registry)
        self.registry = registry
        self.hooks = hooks
        self.options = options or TablineOptions()
        self.filter = BufferValidityFilter(registry, logger_name="tabline_engine.buffers")
        self.encoder = ClickRegionEncoder(
            capabilities,
            grammar=grammar,
            options=self.options.encoder,
            logger_name="tabline_engine.clicks",
        )
        self.selected: BufferHandle | None = None
        self._visible: List[BufferHandle] = []

    @property
    def visible(self) -> tuple[BufferHandle, ...]:
        return tuple(self._visible)

    def refresh(self) -> str:
        with telemetry.span(
            "tabline::refresh",
            component=True,
            metadata={"mode": self.options.mode.value},
        ) as handle:
            self._visible = self.filter.filter()
            if self.selected is not None and self.selected not in self._visible:
                self.selected = None
            tabs = [
                self.encoder.encode(
                    RenderContext(
                        mode=self.options.mode,
                        buffer_id=buffer_id,
                        label=self.hooks.label_for(buffer_id),
                    )
                )
                for buffer_id in self._visible
            ]
            handle.add_metadata("tab_count", len(tabs))
        line = self.options.separator.join(tabs)
        self.hooks.update_tabline(line)
        self.hooks.log(f"refresh -> tabs={self._visible!r}")
        return line

    def select_buffer(
        self, buffer_id: BufferHandle, *, mode: Optional[InteractionMode] = None
    ) -> bool:
        """Handle a click on the tab for ``buffer_id``.

        The buffer may have gone away since the tab line was drawn; such
        clicks are dropped and the tab line is redrawn.
        """

        if not is_valid(self.registry, buffer_id):
            telemetry.record_event(
                "tabline.stale_click", level="debug", data={"buffer": buffer_id}
            )
            self.hooks.log(f"click <- stale buffer={buffer_id!r}")
            self.refresh()
            return False
        resolved = mode or self.options.mode
        self.selected = buffer_id
        self.hooks.log(f"click <- buffer={buffer_id!r} mode={resolved.value}")
        self.hooks.on_select(buffer_id, resolved)
        self.refresh()
        return True


__all__ = ["TablineController", "TablineHooks"]
