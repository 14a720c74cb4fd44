"""Accumulator for SVG path data (the ``d`` attribute mini-language)."""
from __future__ import annotations

from typing import List

from .errors import DoppelgangerError
from .formatting import Value, fmt_num

# Absolute command letters and their argument counts; the relative form of
# each command is the lowercase letter.
COMMAND_ARITY = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}


class PathData:
    """Append-only buffer of path commands.

    Every command is written as its letter, its space-separated arguments and
    a trailing space, so ``compile`` only has to strip the final separator.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def append(self, command: str, *args: Value) -> "PathData":
        arity = COMMAND_ARITY.get(command.upper())
        if arity is None:
            raise DoppelgangerError("E_PATH_COMMAND", f"unknown path command: {command!r}")
        if len(args) != arity:
            raise DoppelgangerError(
                "E_PATH_COMMAND", f"path command {command} takes {arity} arguments, got {len(args)}"
            )
        self._parts.append("".join(f"{token} " for token in (command, *map(fmt_num, args))))
        return self

    def compile(self) -> str:
        return "".join(self._parts).rstrip()

    def clear(self) -> None:
        self._parts.clear()

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __str__(self) -> str:
        return self.compile()


__all__ = ["COMMAND_ARITY", "PathData"]
