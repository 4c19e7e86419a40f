"""A single Sudoku cell with its remaining candidate digits."""

from __future__ import annotations
from typing import Set

import numpy as np

ALL_DIGITS = frozenset(range(1, 10))


class Cell:
    """
    One square of a 9x9 board.
    
    A cell keeps its fixed position, its solved value (0 while unsolved) and
    the digits still possible for it. Candidates only matter while the cell
    is unsolved; a solved cell always holds an empty candidate set.
    """
    
    def __init__(self, grid: np.ndarray, row: int, col: int):
        """
        Build a cell from the starting grid.
        
        Args:
            grid: The initial 9x9 puzzle (0 for blanks), numpy array or
                  nested lists.
            row, col: Cell position, each in [0, 8].
        """
        grid = np.asarray(grid)
        self._row = row
        self._col = col
        self.value = int(grid[row, col])
        self.candidates: Set[int] = set()
        
        if self.value == 0:
            box_row = (row // 3) * 3
            box_col = (col // 3) * 3
            used = set(grid[row, :].tolist())
            used |= set(grid[:, col].tolist())
            used |= set(grid[box_row:box_row + 3, box_col:box_col + 3].flatten().tolist())
            self.candidates = set(ALL_DIGITS - used)
    
    @property
    def row(self) -> int:
        return self._row
    
    @property
    def col(self) -> int:
        return self._col
    
    @property
    def is_solved(self) -> bool:
        return self.value != 0
    
    def clone(self) -> Cell:
        """Copy the cell; the candidate set is never shared with the copy."""
        other = Cell.__new__(Cell)
        other._row = self._row
        other._col = self._col
        other.value = self.value
        other.candidates = set(self.candidates) if self.value == 0 else set()
        return other
    
    def remove_candidate(self, digit: int) -> bool:
        """Drop a digit from the candidates. Returns True if it was present."""
        if digit in self.candidates:
            self.candidates.remove(digit)
            return True
        return False
    
    def force_candidate(self, digit: int) -> None:
        """Collapse the candidates to exactly one digit (a branch guess)."""
        self.candidates = {digit}
    
    def assign(self, digit: int) -> None:
        """Commit a value. Solved cells carry no candidates."""
        self.value = digit
        self.candidates = set()
    
    def __repr__(self) -> str:
        if self.value:
            return f"Cell(row={self._row}, col={self._col}, value={self.value})"
        return f"Cell(row={self._row}, col={self._col}, candidates={sorted(self.candidates)})"
    
    def __str__(self) -> str:
        return str(self.value)


def compare_cells(a: Cell, b: Cell) -> int:
    """
    Order two cells by how many candidates they have left.
    
    Position is ignored. A negative result means ``a`` has fewer candidates
    and is the better branching choice.
    """
    return (len(a.candidates) > len(b.candidates)) - (len(a.candidates) < len(b.candidates))
