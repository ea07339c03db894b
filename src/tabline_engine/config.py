"""Tab-line options and interaction modes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tabline_engine.runtime.env import env

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class InteractionMode(str, Enum):
    """How clicks on a tab are dispatched by the host."""

    SINGLE_WINDOW = "single-window"
    MULTI_WINDOW = "multi-window"

    @classmethod
    def parse(cls, value: "InteractionMode | str | None") -> "InteractionMode":
        """Lenient lookup: anything unrecognised is single-window."""

        if isinstance(value, InteractionMode):
            return value
        normalized = str(value or "").strip().lower().replace("_", "-")
        if normalized in {"multi-window", "multiwindow"}:
            return cls.MULTI_WINDOW
        return cls.SINGLE_WINDOW


@dataclass(frozen=True, slots=True)
class EncoderOptions:
    """Namespace and handler names the click markup points at."""

    namespace: str = "nvim_bufferline"
    click_handler: str = "handle_click"
    window_click_handler: str = "handle_win_click"

    def __post_init__(self) -> None:
        for name in ("namespace", "click_handler", "window_click_handler"):
            value = getattr(self, name)
            if not value:
                raise ValueError(f"{name} cannot be empty")
            # spliced into host markup, so delimiters must not appear
            if not _IDENTIFIER.match(value):
                raise ValueError(f"{name} '{value}' is not a valid identifier")

    def handler_for(self, mode: InteractionMode) -> str:
        if mode is InteractionMode.MULTI_WINDOW:
            return self.window_click_handler
        return self.click_handler


@dataclass(frozen=True, slots=True)
class TablineOptions:
    """User-facing options consumed by the tab-line pipeline."""

    mode: InteractionMode = InteractionMode.SINGLE_WINDOW
    separator: str = " "
    encoder: EncoderOptions = field(default_factory=EncoderOptions)

    @classmethod
    def from_env(cls, *, mode: Optional[str] = None) -> "TablineOptions":
        namespace = env("NAMESPACE")
        encoder = EncoderOptions(namespace=namespace) if namespace else EncoderOptions()
        return cls(
            mode=InteractionMode.parse(mode or env("MODE")),
            separator=env("SEPARATOR", " ") or " ",
            encoder=encoder,
        )


__all__ = ["InteractionMode", "EncoderOptions", "TablineOptions"]
