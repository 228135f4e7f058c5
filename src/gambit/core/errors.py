"""Exceptions raised by the rule engine."""

from __future__ import annotations


class InvalidSquareError(ValueError):
    """A square coordinate lies outside the 8x8 board."""


class IllegalMoveError(ValueError):
    """A move was submitted that is not legal in the current game."""
