"""Errors raised by the core domain layer."""

from __future__ import annotations


class MoveParseError(ValueError):
    """Move text is not four characters of the form ``[a-h][1-8][a-h][1-8]``."""


class IllegalMoveError(ValueError):
    """Well-formed move text that cannot be applied to the given position."""
