"""Textual front-end for the tab-line pipeline."""

from .controller import TablineController, TablineHooks
from .markup import TEXTUAL_ENCODER_OPTIONS, TextualMarkupGrammar

__all__ = [
    "TEXTUAL_ENCODER_OPTIONS",
    "TablineController",
    "TablineHooks",
    "TextualMarkupGrammar",
]
