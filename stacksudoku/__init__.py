"""Sudoku solving by singleton propagation and stack-driven backtracking."""

from .core import Board, BoardState, Cell, compare_cells
from .solvers import StackSolver, SolverStats, SolveStatus
from .puzzles import PUZZLES, get_puzzle

__all__ = [
    "Board",
    "BoardState",
    "Cell",
    "compare_cells",
    "StackSolver",
    "SolverStats",
    "SolveStatus",
    "PUZZLES",
    "get_puzzle",
]
