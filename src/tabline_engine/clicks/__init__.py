"""Clickable tab regions and the markup grammars that express them."""

from .encoder import ClickRegionBuilder, ClickRegionEncoder, make_clickable
from .grammar import MarkupGrammar, VimTablineGrammar
from .models import ClickRegion, MarkupError, RenderContext

__all__ = [
    "ClickRegion",
    "ClickRegionBuilder",
    "ClickRegionEncoder",
    "MarkupError",
    "MarkupGrammar",
    "RenderContext",
    "VimTablineGrammar",
    "make_clickable",
]
