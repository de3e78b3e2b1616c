"""Solver test suite.

Optimality is checked against the exhaustive BFS distance table from
``conftest.py``. Every returned path is also replayed through the real
game engine, one tile move at a time, to verify that it is legal.
"""

from __future__ import annotations

import itertools

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver import SearchResult, Solver, astar
from backend.models.board import Board, Direction
from backend.models.errors import InvalidBoardError

GOAL = [1, 2, 3, 4, 5, 6, 7, 8, 0]

# The two hardest 3×3 boards (31 moves).
_HARDEST = [
    [8, 6, 7, 2, 5, 4, 3, 0, 1],
    [6, 4, 7, 8, 5, 0, 3, 2, 1],
]


# -- helpers ------------------------------------------------------------------


def _assert_path(start: Board, path: list[Board]) -> None:
    """Check endpoints and that every step is a single blank swap."""
    assert path[0] == start
    assert path[-1].is_goal()
    for before, after in zip(path, path[1:]):
        assert after in before.neighbors()


def _assert_replay(start: Board, path: list[Board]) -> None:
    """Apply the move list via the real game engine and check the win."""
    moves = Solver.moves(path)
    assert all(isinstance(m, Direction) for m in moves)
    game = GamePlay.from_board(start)
    for i, direction in enumerate(moves):
        assert game.move(direction), (
            f"Move {i} ({direction.value}) was invalid at blank "
            f"{game.state.board.blank_index} ({start.key})"
        )
        assert game.state.board == path[i + 1]
    assert game.is_won


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize(
    "tiles, expected",
    [
        (GOAL, True),
        ([1, 2, 3, 4, 0, 6, 7, 5, 8], True),  # (6,5) and (7,5): even
        ([1, 2, 3, 4, 5, 6, 0, 7, 8], True),
        ([2, 1, 3, 4, 5, 6, 7, 8, 0], False),
        ([1, 2, 3, 4, 5, 6, 8, 7, 0], False),
        ([8, 6, 7, 2, 5, 4, 3, 0, 1], True),
    ],
)
def test_is_solvable(tiles, expected) -> None:
    assert Solver.is_solvable(tiles) is expected
    assert Solver.is_solvable(Board.from_sequence(tiles)) is expected


def test_every_board_reachable_from_goal_is_solvable(distances) -> None:
    assert len(distances) == 181_440
    assert all(Solver.is_solvable(b) for b in distances)


def test_solvable_permutations_are_exactly_the_reachable_ones(distances) -> None:
    solvable = {
        Board(perm)
        for perm in itertools.permutations(range(9))
        if Solver.is_solvable(Board(perm))
    }
    assert solvable == set(distances)


def test_single_transposition_flips_parity(distances) -> None:
    swapped = Board.from_sequence([2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert swapped not in distances
    for nb in swapped.neighbors():
        assert not Solver.is_solvable(nb)
        for nb2 in nb.neighbors():
            assert not Solver.is_solvable(nb2)


# -- heuristic ----------------------------------------------------------------


def test_manhattan_is_admissible(distances) -> None:
    for board, d in distances.items():
        assert board.manhattan_distance() <= d


def test_manhattan_is_consistent(sample_boards) -> None:
    for board in sample_boards:
        h = board.manhattan_distance()
        for nb in board.neighbors():
            assert abs(h - nb.manhattan_distance()) == 1


# -- solve --------------------------------------------------------------------


def test_solve_goal_is_single_board() -> None:
    assert Solver.solve(GOAL) == [Board.goal()]


def test_solve_one_move() -> None:
    path = Solver.solve([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert [list(b.tiles) for b in path] == [
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
        GOAL,
    ]


def test_solve_two_moves() -> None:
    path = Solver.solve([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert [list(b.tiles) for b in path] == [
        [1, 2, 3, 4, 5, 6, 0, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 0, 8],
        GOAL,
    ]


@pytest.mark.timeout(600)
def test_solve_sample_is_optimal(distances, sample_boards) -> None:
    for board in sample_boards:
        path = Solver.solve(board)
        assert path is not None, board.key
        _assert_path(board, path)
        assert len(path) - 1 == distances[board], board.key


@pytest.mark.timeout(300)
@pytest.mark.parametrize("tiles", _HARDEST, ids=lambda t: "".join(map(str, t)))
def test_solve_hardest_boards(tiles, distances) -> None:
    board = Board.from_sequence(tiles)
    path = Solver.solve(board)
    assert path is not None
    assert len(path) - 1 == distances[board] == 31
    _assert_replay(board, path)


@pytest.mark.timeout(300)
def test_solve_replays_through_game_engine(sample_boards) -> None:
    for board in sample_boards[::5]:
        _assert_replay(board, Solver.solve(board))


def test_solve_unsolvable_returns_none() -> None:
    assert Solver.solve([2, 1, 3, 4, 5, 6, 7, 8, 0]) is None


@pytest.mark.parametrize(
    "tiles",
    [
        [1, 2, 3],
        [1, 2, 3, 4, 5, 6, 7, 8, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
)
def test_invalid_boards_fail_fast(tiles) -> None:
    with pytest.raises(InvalidBoardError):
        Solver.solve(tiles)
    with pytest.raises(InvalidBoardError):
        Solver.is_solvable(tiles)
    with pytest.raises(InvalidBoardError):
        Solver.hint(tiles)


# -- A* engine ----------------------------------------------------------------


def test_astar_reports_search_statistics() -> None:
    result = astar(Board.from_sequence([1, 2, 3, 4, 0, 6, 7, 5, 8]))
    assert isinstance(result, SearchResult)
    assert result.moves == 2
    assert result.expanded >= result.moves
    assert result.generated > result.expanded


def test_astar_goal_expands_nothing() -> None:
    result = astar(Board.goal())
    assert result.path == [Board.goal()]
    assert result.expanded == 0
    assert result.generated == 1


@pytest.mark.timeout(300)
def test_astar_exhausts_unsolvable_board() -> None:
    """Without the parity gate the engine visits every reachable state, then gives up."""
    assert astar(Board.from_sequence([1, 2, 3, 4, 5, 6, 8, 7, 0])) is None


# -- moves / hint -------------------------------------------------------------


def test_moves_name_tile_directions() -> None:
    path = Solver.solve([1, 2, 3, 4, 5, 6, 0, 7, 8])
    assert Solver.moves(path) == [Direction.LEFT, Direction.LEFT]
    path = Solver.solve([1, 2, 3, 4, 5, 0, 7, 8, 6])
    assert Solver.moves(path) == [Direction.UP]


def test_hint() -> None:
    assert Solver.hint(GOAL) is None
    assert Solver.hint([2, 1, 3, 4, 5, 6, 7, 8, 0]) is None
    assert Solver.hint([1, 2, 3, 4, 5, 6, 7, 0, 8]) == Direction.LEFT
