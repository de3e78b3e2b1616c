from backend.models.board import GOAL_TILES, Board, Direction
from backend.models.errors import InvalidBoardError

__all__ = ["GOAL_TILES", "Board", "Direction", "InvalidBoardError"]
