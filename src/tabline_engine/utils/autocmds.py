"""Autocommand group registration."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence, Union

from tabline_engine.host.protocols import CommandRunner

AutocmdDefinition = Sequence[Union[str, Sequence[str]]]


def _flatten(parts: Iterable[object]) -> list[str]:
    flat: list[str] = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            flat.extend(_flatten(part))
        else:
            flat.append(str(part))
    return flat


def augroup(
    runner: CommandRunner, definitions: Mapping[str, Iterable[AutocmdDefinition]]
) -> list[str]:
    """Recreate each named group with its autocommands.

    Every group is cleared with ``autocmd!`` before its definitions are added,
    so calling this twice does not duplicate handlers. Returns the commands
    that were sent to the host.
    """

    issued: list[str] = []
    for group_name, group in definitions.items():
        commands = [f"augroup {group_name}", "autocmd!"]
        commands.extend(
            " ".join(_flatten(["autocmd", definition])) for definition in group
        )
        commands.append("augroup END")
        for command in commands:
            runner.command(command)
        issued.extend(commands)
    return issued


__all__ = ["AutocmdDefinition", "augroup"]
