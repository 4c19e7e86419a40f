"""Core module: cells, boards and grid validation."""

from .cell import Cell, compare_cells
from .board import Board, BoardState, PropagationResult, peers_of
from .validator import is_valid_grid, validate_solution

__all__ = [
    "Cell",
    "compare_cells",
    "Board",
    "BoardState",
    "PropagationResult",
    "peers_of",
    "is_valid_grid",
    "validate_solution",
]
