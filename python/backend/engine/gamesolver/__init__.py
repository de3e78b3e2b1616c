from backend.engine.gamesolver.priority_queue import PriorityQueue
from backend.engine.gamesolver.search import SearchNode, SearchResult, astar
from backend.engine.gamesolver.solver import Solver

__all__ = ["PriorityQueue", "SearchNode", "SearchResult", "Solver", "astar"]
