"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any, Tuple
import logging
import time
import tracemalloc

from ..core.board import Board

logger = logging.getLogger(__name__)


class SolveStatus(Enum):
    """Terminal outcome of a solver run."""
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    INVALID_INPUT = "invalid_input"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    status: SolveStatus = SolveStatus.UNSOLVABLE
    time_seconds: float = 0.0
    memory_bytes: int = 0
    
    # Search counters
    boards_generated: int = 0
    boards_tested: int = 0
    contradictions: int = 0
    max_stack_depth: int = 0
    
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "status": self.status.value,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "boards_generated": self.boards_generated,
            "boards_tested": self.boards_tested,
            "contradictions": self.contradictions,
            "max_stack_depth": self.max_stack_depth,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""
    
    name: str = "BaseSolver"
    
    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak memory with tracemalloc. Slows the
                          search down noticeably on hard puzzles.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)
    
    def solve(self, grid) -> Tuple[Optional[Board], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.
        
        The input is checked before any search work; an illegal starting
        grid ends the run with ``SolveStatus.INVALID_INPUT``.
        
        Args:
            grid: 9x9 array-like of ints (0 for blanks), or a Board.
            
        Returns:
            Tuple of (solved board or None, stats).
        
        Raises:
            ValueError: If the grid is not 9x9 or holds non-integer values.
        """
        self.stats = SolverStats(algorithm=self.name)
        
        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()
        
        try:
            if isinstance(grid, Board):
                grid = grid.to_array()
            board = Board(grid)
            if not board.validate():
                logger.warning("Rejecting invalid puzzle:\n%s", board)
                self.stats.status = SolveStatus.INVALID_INPUT
                solution = None
            else:
                solution = self._solve(board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak
        
        logger.info(
            "%s finished: %s (%d boards generated, %d tested, %.4fs)",
            self.name, self.stats.status.value, self.stats.boards_generated,
            self.stats.boards_tested, self.stats.time_seconds
        )
        return solution, self.stats
    
    @abstractmethod
    def _solve(self, board: Board) -> Optional[Board]:
        """
        Internal solve method to be implemented by subclasses.
        
        Args:
            board: A valid starting board owned by the solver.
            
        Returns:
            The solved board, or None. Must set ``self.stats.status``.
        """
        pass
    
    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
