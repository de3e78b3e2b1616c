"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver.solver import Solver
from backend.models.board import GOAL_TILES, Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by rejection-sampling random permutations."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return Board.goal()

    @staticmethod
    def shuffle(rng: random.Random | None = None) -> Board:
        """Return a uniformly random *solvable* board.

        ``random.shuffle`` is a Fisher–Yates shuffle, so every permutation
        is equally likely; half of them are rejected for odd parity.
        Pass a seeded ``random.Random`` for reproducible boards.
        """
        rng = rng or random.Random()
        tiles = list(GOAL_TILES)
        attempts = 0
        while True:
            attempts += 1
            rng.shuffle(tiles)
            board = Board(tuple(tiles))
            if Solver.is_solvable(board):
                logger.debug("Shuffled %s after %d attempt(s)", board.key, attempts)
                return board
