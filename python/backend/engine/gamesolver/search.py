"""A* search over 8-puzzle boards.

Nodes live in a per-search arena (a plain list) and refer to their
parent by index, so the search tree never holds reference cycles. The
open set is a :class:`PriorityQueue` keyed by ``f = g + h`` and the closed
set holds canonical board keys. A board may sit in the open set more than
once; the closed set guarantees it is expanded at most once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend.engine.gamesolver.priority_queue import PriorityQueue
from backend.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchNode:
    board: Board
    g: int
    h: int
    f: int
    parent: int | None


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a successful search."""

    path: list[Board]
    expanded: int
    generated: int

    @property
    def moves(self) -> int:
        return len(self.path) - 1


def _node(board: Board, g: int, parent: int | None) -> SearchNode:
    h = board.manhattan_distance()
    return SearchNode(board=board, g=g, h=h, f=g + h, parent=parent)


def _reconstruct(arena: list[SearchNode], index: int) -> list[Board]:
    path: list[Board] = []
    cursor: int | None = index
    while cursor is not None:
        node = arena[cursor]
        path.append(node.board)
        cursor = node.parent
    path.reverse()
    return path


def astar(start: Board) -> SearchResult | None:
    """Return an optimal path from *start* to the goal, or ``None``.

    An unsolvable start exhausts every reachable state and returns
    ``None``.
    """
    arena: list[SearchNode] = [_node(start, 0, None)]
    open_set: PriorityQueue[int] = PriorityQueue()
    open_set.enqueue(0, arena[0].f)
    closed: set[str] = set()
    expanded = 0

    while not open_set.is_empty():
        index = open_set.dequeue()
        assert index is not None
        current = arena[index]

        if current.board.is_goal():
            path = _reconstruct(arena, index)
            logger.debug(
                "A* reached goal in %d moves (%d expanded, %d generated)",
                len(path) - 1, expanded, len(arena),
            )
            return SearchResult(path=path, expanded=expanded, generated=len(arena))

        key = current.board.key
        if key in closed:
            continue
        closed.add(key)
        expanded += 1

        for neighbor in current.board.neighbors():
            if neighbor.key in closed:
                continue
            arena.append(_node(neighbor, current.g + 1, index))
            open_set.enqueue(len(arena) - 1, arena[-1].f)

    logger.debug(
        "A* exhausted the open set (%d expanded, %d generated)",
        expanded, len(arena),
    )
    return None
