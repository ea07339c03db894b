from __future__ import annotations

from typing import List, Tuple

import pytest

from tabline_engine.adapters.textual import (
    TEXTUAL_ENCODER_OPTIONS,
    TablineController,
    TablineHooks,
    TextualMarkupGrammar,
)
from tabline_engine.clicks import ClickRegionBuilder, ClickRegionEncoder, RenderContext
from tabline_engine.config import InteractionMode, TablineOptions
from tabline_engine.host import InMemoryHost


def make_host(count: int = 3) -> InMemoryHost:
    host = InMemoryHost()
    for index in range(1, count + 1):
        host.add_buffer(f"file_{index}.txt")
    return host


def make_controller(
    host: InMemoryHost,
    *,
    lines: List[str] | None = None,
    selections: List[Tuple[int, InteractionMode]] | None = None,
    logs: List[str] | None = None,
    mode: InteractionMode = InteractionMode.SINGLE_WINDOW,
) -> TablineController:
    line_sink = lines if lines is not None else []
    select_sink = selections if selections is not None else []
    log_sink = logs if logs is not None else []
    hooks = TablineHooks(
        update_tabline=line_sink.append,
        label_for=host.buffer_name,
        on_select=lambda buffer_id, resolved: select_sink.append((buffer_id, resolved)),
        log=log_sink.append,
    )
    return TablineController(host, hooks, options=TablineOptions(mode=mode))


def test_refresh_encodes_listed_buffers() -> None:
    host = make_host()
    host.set_listed(2, False)
    lines: List[str] = []
    controller = make_controller(host, lines=lines)

    line = controller.refresh()

    assert line == (
        "%1@nvim_bufferline#handle_click@file_1.txt "
        "%3@nvim_bufferline#handle_click@file_3.txt"
    )
    assert lines == [line]
    assert controller.visible == (1, 3)


def test_refresh_uses_multi_window_handler() -> None:
    host = make_host(1)
    controller = make_controller(host, mode=InteractionMode.MULTI_WINDOW)

    assert controller.refresh() == "%1@nvim_bufferline#handle_win_click@file_1.txt"


def test_refresh_without_click_support_renders_plain_labels() -> None:
    host = make_host(2)
    host.clickable = False
    controller = make_controller(host)

    assert controller.refresh() == "file_1.txt file_2.txt"


def test_refresh_recomputes_every_pass() -> None:
    host = make_host(2)
    controller = make_controller(host)
    controller.refresh()

    host.add_buffer("new.txt")
    host.wipe(1)

    controller.refresh()
    assert controller.visible == (2, 3)


def test_select_buffer_notifies_ui() -> None:
    host = make_host()
    selections: List[Tuple[int, InteractionMode]] = []
    logs: List[str] = []
    controller = make_controller(host, selections=selections, logs=logs)

    assert controller.select_buffer(2) is True

    assert controller.selected == 2
    assert selections == [(2, InteractionMode.SINGLE_WINDOW)]
    assert any(line.startswith("click <-") for line in logs)


def test_select_buffer_with_explicit_mode() -> None:
    host = make_host()
    selections: List[Tuple[int, InteractionMode]] = []
    controller = make_controller(host, selections=selections)

    controller.select_buffer(3, mode=InteractionMode.MULTI_WINDOW)

    assert selections == [(3, InteractionMode.MULTI_WINDOW)]


def test_stale_click_is_ignored() -> None:
    host = make_host()
    selections: List[Tuple[int, InteractionMode]] = []
    lines: List[str] = []
    controller = make_controller(host, selections=selections, lines=lines)
    controller.refresh()
    host.wipe(2)

    assert controller.select_buffer(2) is False

    assert selections == []
    assert controller.selected is None
    assert "%2@" not in lines[-1]


def test_selection_cleared_when_buffer_unlisted() -> None:
    host = make_host()
    controller = make_controller(host)
    controller.select_buffer(1)

    host.set_listed(1, False)
    controller.refresh()

    assert controller.selected is None


def test_textual_grammar_renders_click_action() -> None:
    host = make_host()
    encoder = ClickRegionEncoder(
        host, grammar=TextualMarkupGrammar(), options=TEXTUAL_ENCODER_OPTIONS
    )

    single = encoder.encode(RenderContext("single-window", 3, "bar"))
    multi = encoder.encode(RenderContext("multi-window", 7, "foo.txt"))

    assert single == "[@click=app.select_buffer(3)]bar[/]"
    assert multi == "[@click=app.select_buffer_in_window(7)]foo.txt[/]"


def test_textual_grammar_escapes_label_markup() -> None:
    region = (
        ClickRegionBuilder(TEXTUAL_ENCODER_OPTIONS)
        .for_buffer(4)
        .with_label("[bold]x")
        .build()
    )

    rendered = TextualMarkupGrammar().render(region)

    assert rendered.startswith("[@click=app.select_buffer(4)]")
    assert rendered.endswith("[/]")
    assert "\\[bold]" in rendered


def test_plain_labels_are_escaped_without_click_support() -> None:
    host = make_host(1)
    host.clickable = False
    encoder = ClickRegionEncoder(
        host, grammar=TextualMarkupGrammar(), options=TEXTUAL_ENCODER_OPTIONS
    )

    rendered = encoder.encode(RenderContext("single-window", 1, "[bold]x"))

    assert rendered == TextualMarkupGrammar().plain("[bold]x")
    assert "\\[bold]" in rendered


class RegistryOnly:
    def list_all_buffers(self) -> List[int]:
        return [1]

    def buffer_exists(self, handle: int) -> bool:
        return handle == 1

    def is_listed(self, handle: int) -> bool:
        return True


class ClicksOff:
    def supports_clickable_tabs(self) -> bool:
        return False


def test_controller_requires_capability_probe() -> None:
    hooks = TablineHooks(update_tabline=lambda line: None)

    with pytest.raises(TypeError):
        TablineController(RegistryOnly(), hooks)


def test_controller_accepts_separate_capability_probe() -> None:
    lines: List[str] = []
    hooks = TablineHooks(update_tabline=lines.append)
    controller = TablineController(RegistryOnly(), hooks, capabilities=ClicksOff())

    assert controller.refresh() == "buffer 1"
    assert lines == ["buffer 1"]
