"""8-puzzle solver."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from backend.engine.gamesolver.search import astar
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)

# Blank index delta → direction the swapped tile travels.
_DELTA_TO_DIRECTION: dict[int, Direction] = {
    -3: Direction.DOWN,
    3: Direction.UP,
    -1: Direction.RIGHT,
    1: Direction.LEFT,
}


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board | Sequence[int]) -> list[Board] | None:
        """Return the optimal board path from *board* to the goal.

        The path includes both endpoints. Returns ``None`` when no path
        exists. Raises :class:`InvalidBoardError` for malformed input.
        """
        start = Board.coerce(board)

        if not Solver.is_solvable(start):
            logger.warning("No solution: %s has odd inversion parity", start.key)
            return None

        result = astar(start)
        if result is None:
            logger.warning("No solution found for %s", start.key)
            return None

        logger.info(
            "Solved %s in %d moves (%d nodes expanded)",
            start.key, result.moves, result.expanded,
        )
        return result.path

    @staticmethod
    def moves(path: Sequence[Board]) -> list[Direction]:
        """Translate a board path into the tile moves that produce it."""
        directions: list[Direction] = []
        for before, after in zip(path, path[1:]):
            delta = after.blank_index - before.blank_index
            directions.append(_DELTA_TO_DIRECTION[delta])
        return directions

    @staticmethod
    def hint(board: Board | Sequence[int]) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        start = Board.coerce(board)
        if start.is_goal():
            return None

        path = Solver.solve(start)
        if not path:
            return None
        return Solver.moves(path[:2])[0]

    @staticmethod
    def is_solvable(board: Board | Sequence[int]) -> bool:
        """Return True if *board* can reach the goal state.

        A slide never changes the parity of the inversion count of the
        blank-removed tile sequence, and the goal has zero inversions.
        """
        tiles = [v for v in Board.coerce(board).tiles if v != 0]
        inversions = 0
        for i in range(len(tiles) - 1):
            for j in range(i + 1, len(tiles)):
                if tiles[i] > tiles[j]:
                    inversions += 1
        return inversions % 2 == 0
