"""Validation utilities for 9x9 Sudoku grids."""

from __future__ import annotations
import numpy as np

SIZE = 9
BOX_SIZE = 3


def _no_duplicates(values: np.ndarray) -> bool:
    """True if the non-zero entries of a unit are all distinct."""
    non_zero = values[values != 0]
    return len(non_zero) == len(np.unique(non_zero))


def values_in_range(grid: np.ndarray) -> bool:
    """Every entry is 0 (blank) or a digit 1-9."""
    return bool(np.all((grid >= 0) & (grid <= SIZE)))


def rows_are_valid(grid: np.ndarray) -> bool:
    """No row repeats a non-zero digit."""
    return all(_no_duplicates(grid[i, :]) for i in range(SIZE))


def columns_are_valid(grid: np.ndarray) -> bool:
    """No column repeats a non-zero digit."""
    return all(_no_duplicates(grid[:, j]) for j in range(SIZE))


def boxes_are_valid(grid: np.ndarray) -> bool:
    """No 3x3 box repeats a non-zero digit."""
    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            box = grid[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE].flatten()
            if not _no_duplicates(box):
                return False
    return True


def is_valid_grid(grid: np.ndarray) -> bool:
    """
    Check a grid against all four Sudoku rules.
    
    Blanks are allowed, so this accepts both legal starting puzzles and
    finished solutions.
    
    Args:
        grid: A 9x9 integer array.
        
    Returns:
        True if values are in range and no row, column or box repeats a digit.
    """
    grid = np.asarray(grid)
    if grid.shape != (SIZE, SIZE):
        return False
    return (
        values_in_range(grid)
        and rows_are_valid(grid)
        and columns_are_valid(grid)
        and boxes_are_valid(grid)
    )


def is_complete_grid(grid: np.ndarray) -> bool:
    """True if no cell is blank."""
    return bool(np.all(np.asarray(grid) != 0))


def matches_clues(puzzle: np.ndarray, solution: np.ndarray) -> bool:
    """Every digit given in the puzzle appears unchanged in the solution."""
    puzzle = np.asarray(puzzle)
    solution = np.asarray(solution)
    if puzzle.shape != solution.shape:
        return False
    given = puzzle != 0
    return bool(np.array_equal(puzzle[given], solution[given]))


def validate_solution(puzzle: np.ndarray, solution: np.ndarray) -> bool:
    """
    Validate that a solution correctly solves the puzzle.
    
    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.
        
    Returns:
        True if the solution is complete, valid and keeps the puzzle's clues.
    """
    return (
        matches_clues(puzzle, solution)
        and is_complete_grid(solution)
        and is_valid_grid(solution)
    )
