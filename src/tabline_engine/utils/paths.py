"""Host platform details."""

from __future__ import annotations

import platform
from typing import Optional


def path_sep(system: Optional[str] = None) -> str:
    name = system if system is not None else platform.system()
    return "\\" if name == "Windows" else "/"


PATH_SEP = path_sep()

__all__ = ["PATH_SEP", "path_sep"]
