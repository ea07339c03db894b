"""Click markup for Textual's content markup language."""

from __future__ import annotations

from textual.markup import escape

from tabline_engine.clicks.models import ClickRegion
from tabline_engine.config import EncoderOptions

# Action names the TablineApp exposes as ``action_<name>``.
TEXTUAL_ENCODER_OPTIONS = EncoderOptions(
    namespace="app",
    click_handler="select_buffer",
    window_click_handler="select_buffer_in_window",
)


class TextualMarkupGrammar:
    """``[@click=<namespace>.<handler>(<id>)]<label>[/]``"""

    name = "textual"

    def render(self, region: ClickRegion) -> str:
        action = f"{region.namespace}.{region.handler}({region.tag})"
        return f"[@click={action}]{escape(region.label)}[/]"

    def plain(self, label: str) -> str:
        return escape(label)


__all__ = ["TEXTUAL_ENCODER_OPTIONS", "TextualMarkupGrammar"]
