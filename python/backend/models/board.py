"""Board model for the 8-puzzle."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidBoardError

SIZE = 3
CELLS = SIZE * SIZE
GOAL_TILES: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)


class Direction(StrEnum):
    """Direction a *tile* travels when it slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides for each direction.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}

# Blank displacements in emission order: up, down, left, right.
_BLANK_STEPS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Goal cell of every tile value; the blank is not scored.
_TARGETS: dict[int, tuple[int, int]] = {
    v: divmod(v - 1, SIZE) for v in range(1, CELLS)
}


@dataclass(frozen=True, slots=True)
class Board:
    """An immutable 3×3 arrangement of tiles.

    Tiles are stored row-major as a 9-tuple. 0 represents the blank.
    Every transformation returns a new ``Board``.
    """

    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_sequence(cls, seq: Sequence[int]) -> Board:
        """Validate *seq* and wrap it in a board.

        Example::

            Board.from_sequence([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = tuple(seq)
        if len(tiles) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        for v in tiles:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoardError(f"Tile {v!r} is not an integer.")
            if not 0 <= v < CELLS:
                raise InvalidBoardError(
                    f"Tile {v} is out of range 0..{CELLS - 1}."
                )
        if len(set(tiles)) != CELLS:
            dupes = sorted({v for v in tiles if tiles.count(v) > 1})
            raise InvalidBoardError(f"Duplicate tiles: {dupes}.")
        return cls(tiles)

    @classmethod
    def coerce(cls, value: Board | Sequence[int]) -> Board:
        if isinstance(value, Board):
            return value
        return cls.from_sequence(value)

    @classmethod
    def goal(cls) -> Board:
        return cls(GOAL_TILES)

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def key(self) -> str:
        """Canonical digit string, e.g. ``"123456780"``."""
        return "".join(map(str, self.tiles))

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * SIZE + col]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == GOAL_TILES

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        return self.tiles[index] == GOAL_TILES[index]

    def manhattan_distance(self) -> int:
        """Sum of grid distances of every non-blank tile to its goal cell."""
        distance = 0
        for i, v in enumerate(self.tiles):
            if v == 0:
                continue
            tr, tc = _TARGETS[v]
            r, c = divmod(i, SIZE)
            distance += abs(r - tr) + abs(c - tc)
        return distance

    # -- transformations ------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards one slide away, blank moving up, down, left, right."""
        bi = self.blank_index
        br, bc = divmod(bi, SIZE)
        result: list[Board] = []
        for dr, dc in _BLANK_STEPS:
            nr, nc = br + dr, bc + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                result.append(self._swap(bi, nr * SIZE + nc))
        return result

    def slide(self, index: int) -> Board | None:
        """Slide the tile at *index* into the blank.

        Returns ``None`` if the tile is not orthogonally adjacent to the
        blank.
        """
        if not 0 <= index < CELLS:
            return None
        bi = self.blank_index
        r, c = divmod(index, SIZE)
        br, bc = divmod(bi, SIZE)
        if abs(r - br) + abs(c - bc) != 1:
            return None
        return self._swap(bi, index)

    def move(self, direction: Direction) -> Board | None:
        """Slide the tile next to the blank in *direction*, if there is one."""
        br, bc = divmod(self.blank_index, SIZE)
        dr, dc = _TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return None
        return self._swap(br * SIZE + bc, tr * SIZE + tc)

    # -- helpers --------------------------------------------------------------

    def _swap(self, i: int, j: int) -> Board:
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board(tuple(tiles))

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(v) if v else "." for v in row) for row in self.rows()
        )
