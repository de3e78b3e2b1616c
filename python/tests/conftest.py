"""Shared fixtures.

``distances`` is the exact move count to goal for every one of the
181,440 solvable 3×3 boards, found by breadth-first search outward from
the goal. It is the ground truth for optimality and parity checks.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from backend.models.board import Board


@pytest.fixture(scope="session")
def distances() -> dict[Board, int]:
    goal = Board.goal()
    dist: dict[Board, int] = {goal: 0}
    frontier: deque[Board] = deque([goal])
    while frontier:
        board = frontier.popleft()
        d = dist[board] + 1
        for nb in board.neighbors():
            if nb not in dist:
                dist[nb] = d
                frontier.append(nb)
    return dist


@pytest.fixture(scope="session")
def sample_boards(distances: dict[Board, int]) -> list[Board]:
    """A reproducible spread of boards, a handful at every depth."""
    rng = random.Random(42)
    by_depth: dict[int, list[Board]] = {}
    for board, d in distances.items():
        by_depth.setdefault(d, []).append(board)
    sample: list[Board] = []
    for d in sorted(by_depth):
        boards = sorted(by_depth[d], key=lambda b: b.key)
        sample.extend(rng.sample(boards, min(3, len(boards))))
    return sample
