"""Executable Textual app that renders a clickable buffer tab line."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use tabline_engine.adapters.textual.app"
    ) from exc

from tabline_engine.config import InteractionMode, TablineOptions
from tabline_engine.host import InMemoryHost

from .controller import TablineController, TablineHooks
from .markup import TEXTUAL_ENCODER_OPTIONS, TextualMarkupGrammar


def create_demo_host(buffer_count: int = 4) -> InMemoryHost:
    """Seed a host with a few listed buffers and one unlisted scratch buffer."""

    host = InMemoryHost()
    for index in range(1, buffer_count + 1):
        host.add_buffer(f"file_{index}.txt")
    host.add_buffer("[scratch]", listed=False)
    return host


@dataclass
class UIState:
    tabline_text: str = ""
    status_text: str = ""


class TablineApp(App[None]):
    """Tab line on top, selected buffer below, host actions on keys."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#tabline {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("n", "new_buffer", "New buffer"),
        ("d", "wipe_selected", "Wipe"),
        ("u", "toggle_listed", "Unlist"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        host: Optional[InMemoryHost] = None,
        mode: InteractionMode = InteractionMode.SINGLE_WINDOW,
    ) -> None:
        super().__init__()
        self.host = host or create_demo_host()
        self._state = UIState()
        self._mode = mode
        self.controller: TablineController | None = None
        self._tabline_widget: Static | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._tabline_widget = Static("", id="tabline")
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._tabline_widget
        yield self._buffer_widget
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TablineHooks(
            update_tabline=self._update_tabline,
            label_for=self._label_for,
            on_select=self._on_select,
        )
        self.controller = TablineController(
            self.host,
            hooks,
            options=TablineOptions(
                mode=self._mode, separator=" | ", encoder=TEXTUAL_ENCODER_OPTIONS
            ),
            grammar=TextualMarkupGrammar(),
        )
        self.controller.refresh()

    def action_select_buffer(self, buffer_id: int) -> None:
        if self.controller:
            self.controller.select_buffer(buffer_id)

    def action_select_buffer_in_window(self, buffer_id: int) -> None:
        if self.controller:
            self.controller.select_buffer(buffer_id, mode=InteractionMode.MULTI_WINDOW)

    def action_new_buffer(self) -> None:
        handle = self.host.add_buffer(f"untitled_{len(self.host.list_all_buffers())}")
        self._update_status(f"added buffer {handle}")
        self._refresh()

    def action_wipe_selected(self) -> None:
        selected = self.controller.selected if self.controller else None
        if selected is None:
            self._update_status("no buffer selected")
            return
        self.host.wipe(selected)
        self._update_status(f"wiped buffer {selected}")
        self._refresh()

    def action_toggle_listed(self) -> None:
        selected = self.controller.selected if self.controller else None
        if selected is None:
            self._update_status("no buffer selected")
            return
        self.host.set_listed(selected, False)
        self._update_status(f"unlisted buffer {selected}")
        self._refresh()

    def _refresh(self) -> None:
        if self.controller:
            self.controller.refresh()
        self._show_selected()

    def _label_for(self, buffer_id: int) -> str:
        marker = "*" if self.controller and self.controller.selected == buffer_id else ""
        return f"{buffer_id}:{self.host.buffer_name(buffer_id)}{marker}"

    def _on_select(self, buffer_id: int, mode: InteractionMode) -> None:
        self._update_status(f"select buffer {buffer_id} ({mode.value})")
        self._show_selected()

    def _show_selected(self) -> None:
        if not self._buffer_widget:
            return
        selected = self.controller.selected if self.controller else None
        if selected is None:
            self._buffer_widget.update("click a tab to select a buffer")
        else:
            self._buffer_widget.update(f"buffer {selected}: {self.host.buffer_name(selected)}")

    def _update_tabline(self, text: str) -> None:
        self._state.tabline_text = text
        if self._tabline_widget:
            self._tabline_widget.update(text)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the tab-line Textual demo.")
    parser.add_argument(
        "--buffers",
        type=int,
        default=_env_int("TABLINE_ENGINE_DEMO_BUFFERS", 4),
        help="Number of listed buffers to start with (default: 4)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in InteractionMode],
        default=os.environ.get("TABLINE_ENGINE_MODE", InteractionMode.SINGLE_WINDOW.value),
        help="Click dispatch mode (default: single-window)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    app = TablineApp(
        host=create_demo_host(args.buffers),
        mode=InteractionMode.parse(args.mode),
    )
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
