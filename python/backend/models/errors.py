"""Exceptions raised by the puzzle backend."""

from __future__ import annotations


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0..8."""
