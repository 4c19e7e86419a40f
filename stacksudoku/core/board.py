"""9x9 board of candidate-tracking cells with singleton propagation."""

from __future__ import annotations
from collections import deque
from enum import Enum
from functools import lru_cache
from typing import Deque, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .cell import Cell, compare_cells
from .validator import is_valid_grid, SIZE, BOX_SIZE

TOTAL_CELLS = SIZE * SIZE


class BoardState(Enum):
    """Where a board stands after propagation."""
    ACTIVE = "active"
    CONTRADICTION = "contradiction"
    COMPLETE = "complete"
    NEEDS_BRANCH = "needs_branch"


class PropagationResult(NamedTuple):
    state: BoardState
    branch_cell: Optional[Cell] = None


@lru_cache(maxsize=None)
def peers_of(row: int, col: int) -> Tuple[Tuple[int, int], ...]:
    """
    Get all peer positions (same row, column or box) in row-major order.
    
    The cell itself is excluded.
    """
    peers = set()
    for i in range(SIZE):
        peers.add((row, i))
        peers.add((i, col))
    
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            peers.add((box_row + i, box_col + j))
    
    peers.remove((row, col))
    return tuple(sorted(peers))


class Board:
    """
    A 9x9 grid of Cells plus a count of solved cells and a queue of cells
    waiting to be committed.
    
    The queue only ever holds cells that were just reduced to a single
    candidate. ``propagate`` drains it, cascading eliminations to peers,
    until the board is complete, contradictory, or needs a guess.
    """
    
    def __init__(self, grid):
        """
        Build a board from a starting grid.
        
        Args:
            grid: 9x9 array-like of ints, 0 for blanks.
        
        Raises:
            ValueError: If the grid is not 9x9 or holds non-integers
                        (floats, or ints too large for int64).
        """
        grid = np.asarray(grid)
        if grid.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
        if not np.issubdtype(grid.dtype, np.integer):
            raise ValueError(f"Grid values must be integers, got dtype {grid.dtype}")
        # Out-of-range values survive until validate() rejects them
        grid = grid.astype(np.int64)
        
        self._cells: List[List[Cell]] = [
            [Cell(grid, row, col) for col in range(SIZE)] for row in range(SIZE)
        ]
        self.filled = int(np.sum(grid != 0))
        self._pending: Deque[Cell] = deque()
        self._contradiction = False
        
        for cell in self.cells():
            if cell.is_solved:
                continue
            if not cell.candidates:
                self._contradiction = True
            elif len(cell.candidates) == 1:
                self._pending.append(cell)
    
    def clone(self) -> Board:
        """Deep copy every cell. The copy starts with no pending work."""
        other = Board.__new__(Board)
        other._cells = [[cell.clone() for cell in row] for row in self._cells]
        other.filled = self.filled
        other._pending = deque()
        other._contradiction = self._contradiction
        return other
    
    def branch(self, cell: Cell, digit: int) -> Board:
        """
        Make a child board that guesses ``digit`` for ``cell``.
        
        The guess is queued in the child so its next ``propagate`` commits it.
        """
        child = self.clone()
        target = child.cell(cell.row, cell.col)
        target.force_candidate(digit)
        child._pending.append(target)
        return child
    
    def cell(self, row: int, col: int) -> Cell:
        return self._cells[row][col]
    
    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._cells:
            yield from row
    
    @property
    def pending(self) -> Tuple[Cell, ...]:
        return tuple(self._pending)
    
    @property
    def state(self) -> BoardState:
        if self._contradiction:
            return BoardState.CONTRADICTION
        if self._pending:
            return BoardState.ACTIVE
        if self.filled == TOTAL_CELLS:
            return BoardState.COMPLETE
        return BoardState.NEEDS_BRANCH
    
    def eliminate(self, cell: Cell, digit: int) -> bool:
        """
        Remove ``digit`` from an unsolved cell's candidates.
        
        Queues the cell when this removal leaves exactly one candidate.
        
        Returns:
            False if the cell has no candidates left, True otherwise.
        """
        if cell.is_solved:
            return True
        if cell.remove_candidate(digit) and len(cell.candidates) == 1:
            self._pending.append(cell)
        return bool(cell.candidates)
    
    def propagate(self) -> PropagationResult:
        """
        Commit queued singletons and cascade the eliminations to peers.
        
        Stops at the first emptied candidate set. Cells mutated before that
        point stay mutated; a contradictory board is meant to be discarded.
        
        Returns:
            CONTRADICTION, COMPLETE, or NEEDS_BRANCH with the cell to guess.
        """
        while self._pending and not self._contradiction:
            cell = self._pending.popleft()
            if cell.is_solved:
                continue
            if not cell.candidates:
                self._contradiction = True
                break
            
            digit = next(iter(cell.candidates))
            cell.assign(digit)
            self.filled += 1
            
            for row, col in peers_of(cell.row, cell.col):
                if not self.eliminate(self._cells[row][col], digit):
                    self._contradiction = True
                    break
        
        state = self.state
        if state is BoardState.NEEDS_BRANCH:
            return PropagationResult(state, self.get_priority())
        return PropagationResult(state)
    
    def get_priority(self) -> Optional[Cell]:
        """
        Pick the unsolved cell to branch on.
        
        Scans row-major keeping the first cell with the fewest candidates,
        but returns the first 2-candidate cell as soon as it is seen. Ties
        above two candidates go to whichever cell the scan met first.
        
        Returns:
            The chosen cell, or None if every cell is solved.
        """
        best = None
        for cell in self.cells():
            if cell.is_solved:
                continue
            if best is None or compare_cells(cell, best) < 0:
                best = cell
                if len(best.candidates) == 2:
                    return best
        return best
    
    def validate(self) -> bool:
        """Check value range and that no row, column or box repeats a digit."""
        return is_valid_grid(self.to_array())
    
    def to_array(self) -> np.ndarray:
        """Current values as a 9x9 int64 array."""
        return np.array(
            [[cell.value for cell in row] for row in self._cells], dtype=np.int64
        )
    
    def to_list(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self._cells]
    
    def to_string(self) -> str:
        """Compact 81-character form, 0 for blanks."""
        return ''.join(str(cell.value) for cell in self.cells())
    
    @classmethod
    def from_string(cls, s: str) -> Board:
        """
        Create a board from a string representation.
        
        Args:
            s: 81 characters, 0 or . for blanks, 1-9 for values.
               Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != TOTAL_CELLS:
            raise ValueError(f"String length must be {TOTAL_CELLS}, got {len(s)}")
        
        grid = np.zeros((SIZE, SIZE), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '.':
                continue
            if not c.isdigit():
                raise ValueError(f"Unexpected character {c!r} at position {idx}")
            grid[idx // SIZE, idx % SIZE] = int(c)
        return cls(grid)
    
    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> Board:
        """Create a board from a 2D list."""
        return cls(data)
    
    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE
        
        for i, row in enumerate(self._cells):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)
            
            row_str = '|'
            for j, cell in enumerate(row):
                row_str += f' {cell.value}' if cell.value else ' .'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)
        
        lines.append(horizontal_sep)
        return '\n'.join(lines)
    
    def __repr__(self) -> str:
        return f"Board(filled={self.filled}, pending={len(self._pending)}, state={self.state.value})"
