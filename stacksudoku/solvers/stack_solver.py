"""Depth-first search over cloned boards, driven by an explicit stack."""

from __future__ import annotations
import logging
from typing import List, Optional

from .base_solver import BaseSolver, SolveStatus
from ..core.board import Board, BoardState

logger = logging.getLogger(__name__)


class StackSolver(BaseSolver):
    """
    Iterative DFS solver with singleton propagation.
    
    Each popped board is propagated. Contradictory boards are dropped, a
    complete board ends the search, and anything else is split into one
    child per candidate of its branch cell. Children are pushed in
    ascending digit order, so the largest digit is explored first. The
    stack is a plain list, which keeps search depth off the call stack.
    """
    
    name = "Stack DFS"
    
    def _solve(self, board: Board) -> Optional[Board]:
        stats = self.stats
        stack: List[Board] = [board]
        stats.boards_generated += 1
        stats.max_stack_depth = 1
        
        while stack:
            board = stack.pop()
            stats.boards_tested += 1
            result = board.propagate()
            
            if result.state is BoardState.CONTRADICTION:
                stats.contradictions += 1
                continue
            
            if result.state is BoardState.COMPLETE:
                if board.validate():
                    stats.status = SolveStatus.SOLVED
                    return board
                logger.error("Board filled but invalid after propagation:\n%s", board)
                stats.status = SolveStatus.INTERNAL_INCONSISTENCY
                return None
            
            cell = result.branch_cell
            logger.debug(
                "Branching on (%d, %d) over %s at depth %d",
                cell.row, cell.col, sorted(cell.candidates), len(stack)
            )
            for digit in sorted(cell.candidates):
                stack.append(board.branch(cell, digit))
                stats.boards_generated += 1
            stats.max_stack_depth = max(stats.max_stack_depth, len(stack))
        
        stats.status = SolveStatus.UNSOLVABLE
        return None
