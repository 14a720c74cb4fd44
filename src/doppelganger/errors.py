"""Exceptions raised by doppelganger."""
from __future__ import annotations


class DoppelgangerError(ValueError):
    """Structured error with a stable code for callers to branch on."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ["DoppelgangerError"]
