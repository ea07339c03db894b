from __future__ import annotations

import pytest

from tabline_engine.clicks import (
    ClickRegionBuilder,
    ClickRegionEncoder,
    MarkupError,
    RenderContext,
    VimTablineGrammar,
    make_clickable,
)
from tabline_engine.config import EncoderOptions, InteractionMode
from tabline_engine.host import InMemoryHost


class ExplodingProbe:
    def supports_clickable_tabs(self) -> bool:
        raise RuntimeError("has() unavailable")


def make_context(
    mode: InteractionMode | str = "single-window",
    buffer_id: int = 3,
    label: str = "bar",
) -> RenderContext:
    return RenderContext(mode=mode, buffer_id=buffer_id, label=label)


def test_label_returned_unchanged_without_click_support() -> None:
    encoder = ClickRegionEncoder(InMemoryHost(clickable=False))

    for context in (
        make_context(),
        make_context("multi-window", 7, "foo.txt"),
        make_context("single-window", 1, ""),
    ):
        assert encoder.encode(context) == context.label


def test_multi_window_uses_window_handler() -> None:
    encoder = ClickRegionEncoder(InMemoryHost())

    result = encoder.encode(make_context("multi-window", 7, "foo.txt"))

    assert result == "%7@nvim_bufferline#handle_win_click@foo.txt"
    assert result.endswith("foo.txt")


def test_single_window_and_unknown_mode_share_handler() -> None:
    encoder = ClickRegionEncoder(InMemoryHost())

    single = encoder.encode(make_context("single-window"))
    unknown = encoder.encode(make_context("unknown-mode"))

    assert single == unknown == "%3@nvim_bufferline#handle_click@bar"


def test_enum_modes_are_accepted() -> None:
    encoder = ClickRegionEncoder(InMemoryHost())

    result = encoder.encode(make_context(InteractionMode.MULTI_WINDOW, 12, "x"))

    assert result == "%12@nvim_bufferline#handle_win_click@x"


def test_capability_checked_on_every_call() -> None:
    host = InMemoryHost()
    encoder = ClickRegionEncoder(host)

    first = encoder.encode(make_context())
    host.clickable = False
    second = encoder.encode(make_context())

    assert first != second
    assert second == "bar"
    assert [name for name, _ in host.calls] == ["supports_clickable_tabs"] * 2


def test_failing_capability_probe_falls_back_to_label() -> None:
    encoder = ClickRegionEncoder(ExplodingProbe())

    assert encoder.encode(make_context(label="plain")) == "plain"


def test_label_is_emitted_verbatim_after_single_line_marker() -> None:
    encoder = ClickRegionEncoder(InMemoryHost())
    label = "two\nlines\r\nhere"

    result = encoder.encode(make_context(label=label))

    assert result == "%3@nvim_bufferline#handle_click@" + label
    marker = result[: -len(label)]
    assert "\n" not in marker and "\r" not in marker


def test_custom_namespace_and_handlers() -> None:
    options = EncoderOptions(
        namespace="tabs", click_handler="on_click", window_click_handler="on_win"
    )
    encoder = ClickRegionEncoder(InMemoryHost(), options=options)

    assert encoder.encode(make_context("multi-window", 5, "z")) == "%5@tabs#on_win@z"


def test_builder_rejects_invalid_buffer_ids() -> None:
    for buffer_id in (0, -4, None, True):
        with pytest.raises(MarkupError) as excinfo:
            ClickRegionBuilder().for_buffer(buffer_id).with_label("x").build()  # type: ignore[arg-type]
        assert excinfo.value.buffer_id == buffer_id


def test_unsupported_host_returns_multiline_label_unchanged() -> None:
    encoder = ClickRegionEncoder(InMemoryHost(clickable=False))

    assert encoder.encode(make_context(label="a\nb")) == "a\nb"


def test_region_carries_selected_handler() -> None:
    region = (
        ClickRegionBuilder().for_buffer(9).in_mode("multiwindow").with_label("l").build()
    )

    assert region.tag == "9"
    assert region.handler == "handle_win_click"
    assert VimTablineGrammar().render(region) == "%9@nvim_bufferline#handle_win_click@l"


def test_make_clickable_helper() -> None:
    assert make_clickable(make_context(), InMemoryHost()) == "%3@nvim_bufferline#handle_click@bar"
    assert make_clickable(make_context(), InMemoryHost(clickable=False)) == "bar"
