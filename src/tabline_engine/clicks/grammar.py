"""Markup grammars that turn a ClickRegion into host tab-line text."""

from __future__ import annotations

from typing import Protocol

from .models import ClickRegion


class MarkupGrammar(Protocol):
    name: str

    def render(self, region: ClickRegion) -> str:
        ...

    def plain(self, label: str) -> str:
        """Render a label with no click region attached."""
        ...


class VimTablineGrammar:
    """``%<id>@<namespace>#<handler>@<label>`` as understood by 'tabline'.

    The handler is an autoload function, so ``namespace#handler`` must resolve
    to a Vimscript function on the host side. Labels pass through untouched.
    """

    name = "vim"

    def render(self, region: ClickRegion) -> str:
        return f"%{region.tag}@{region.namespace}#{region.handler}@{region.label}"

    def plain(self, label: str) -> str:
        return label


__all__ = ["MarkupGrammar", "VimTablineGrammar"]
