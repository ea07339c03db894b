"""User-facing messages written to the host command line."""

from __future__ import annotations

from typing import Optional

from tabline_engine.host.protocols import MessageSink
from tabline_engine.runtime import telemetry

MESSAGE_PREFIX = "[nvim-bufferline]"


def echomsg(sink: MessageSink, msg: str, highlight: Optional[str] = None) -> None:
    hl = highlight or "Title"
    text = f"{MESSAGE_PREFIX} {msg}"
    telemetry.record_event(
        "message.echo",
        level="warning" if hl == "ErrorMsg" else "info",
        data={"message": msg, "highlight": hl},
    )
    sink.echo([(text, hl)], True)


def echoerr(sink: MessageSink, msg: str) -> None:
    echomsg(sink, msg, "ErrorMsg")


__all__ = ["MESSAGE_PREFIX", "echoerr", "echomsg"]
