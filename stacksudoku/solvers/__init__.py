"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SolveStatus
from .stack_solver import StackSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveStatus",
    "StackSolver",
]
