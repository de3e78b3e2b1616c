"""Core gameplay logic — processes moves, solution playback, and win state."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single game session.

    A loaded solution is played back one board at a time with
    :meth:`advance`. While playback is pending, manual moves and
    shuffles are ignored.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.state = GameState(GameGenerator.shuffle(rng))
        self._solution: list[Board] = []
        self._step = 0

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GamePlay:
        """Create a game session from an existing board."""
        obj = object.__new__(cls)
        obj._rng = rng
        obj.state = GameState(board)
        obj._solution = []
        obj._step = 0
        return obj

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        if self.is_playing:
            return False
        board = self.state.board.move(direction)
        if board is None:
            return False
        self.state.apply(board)
        return True

    def move_tile(self, index: int) -> bool:
        """Move the tile at *index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        if self.is_playing:
            return False
        board = self.state.board.slide(index)
        if board is None:
            return False
        self.state.apply(board)
        return True

    def shuffle(self) -> bool:
        """Start over on a fresh solvable board."""
        if self.is_playing:
            return False
        self.state = GameState(GameGenerator.shuffle(self._rng))
        return True

    # -- solution playback ----------------------------------------------------

    def solve(self) -> bool:
        """Compute the optimal path and load it for playback.

        Returns False, leaving the session untouched, if the board is
        already solved, playback is pending, or no solution exists.
        """
        if self.is_won or self.is_playing:
            return False
        path = Solver.solve(self.state.board)
        if path is None:
            return False
        self._solution = path
        self._step = 1
        return True

    def advance(self) -> bool:
        """Apply the next playback step. Returns False when nothing is left."""
        if not self.is_playing:
            return False
        self.state.apply(self._solution[self._step], count=False)
        self._step += 1
        if self._step >= len(self._solution):
            self._solution = []
            self._step = 0
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return bool(self._solution)

    @property
    def remaining(self) -> int:
        """Playback steps still to apply."""
        return len(self._solution) - self._step if self._solution else 0

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
