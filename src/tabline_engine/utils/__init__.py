"""Helpers shared by the tab-line pipeline."""

from .autocmds import augroup
from .messages import echoerr, echomsg
from .paths import PATH_SEP, path_sep
from .sequences import array_concat, filter_duplicates, for_each, join, reverse_lookup

__all__ = [
    "PATH_SEP",
    "array_concat",
    "augroup",
    "echoerr",
    "echomsg",
    "filter_duplicates",
    "for_each",
    "join",
    "path_sep",
    "reverse_lookup",
]
