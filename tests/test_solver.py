"""Unit tests for the stack-based solver."""

import numpy as np
import pytest
from stacksudoku.core.board import Board
from stacksudoku.core.validator import matches_clues, is_complete_grid
from stacksudoku.puzzles import get_puzzle
from stacksudoku.solvers import StackSolver, SolveStatus

from conftest import EASY_PUZZLE, EASY_SOLUTION


@pytest.fixture
def solver():
    return StackSolver(track_memory=False)


class TestSolvablePuzzles:
    """End-to-end runs on puzzles that have solutions."""
    
    def test_classic_puzzle(self, solver):
        """The default built-in puzzle solves to a valid completion."""
        grid = get_puzzle("classic")
        solution, stats = solver.solve(grid)
        
        assert stats.status is SolveStatus.SOLVED
        assert stats.solved
        assert solution.validate()
        assert solution.filled == 81
        assert is_complete_grid(solution.to_array())
        assert matches_clues(grid, solution.to_array())
    
    def test_known_solution(self, solver):
        """The unique solution is found exactly."""
        solution, stats = solver.solve(Board.from_string(EASY_PUZZLE))
        assert stats.solved
        assert solution.to_string() == EASY_SOLUTION
    
    def test_empty_grid(self, solver):
        """An empty grid is completed."""
        solution, stats = solver.solve(np.zeros((9, 9), dtype=np.int32))
        assert stats.solved
        assert solution.validate()
        assert is_complete_grid(solution.to_array())
    
    def test_nested_list_input(self, solver):
        """Nested lists are accepted as input."""
        solution, stats = solver.solve(get_puzzle("easy").tolist())
        assert stats.solved
        assert solution.to_string() == EASY_SOLUTION


class TestCounters:
    """Tests for search statistics."""
    
    def test_counts(self, solver):
        """Search counters are filled in."""
        _, stats = solver.solve(get_puzzle("classic"))
        assert stats.boards_generated >= stats.boards_tested >= 1
        assert stats.max_stack_depth >= 1
        assert stats.time_seconds > 0
    
    def test_counts_do_not_leak_between_runs(self, solver):
        """Repeated runs report identical counters."""
        _, first = solver.solve(get_puzzle("classic"))
        first = first.to_dict()
        _, second = solver.solve(get_puzzle("classic"))
        second = second.to_dict()
        
        for key in ("boards_generated", "boards_tested", "contradictions", "max_stack_depth"):
            assert first[key] == second[key]
    
    def test_memory_tracking(self):
        """Peak memory is recorded by default."""
        _, stats = StackSolver().solve(get_puzzle("easy"))
        assert stats.memory_bytes > 0
    
    def test_memory_tracking_off(self, solver):
        """No memory is recorded when tracking is off."""
        _, stats = solver.solve(get_puzzle("easy"))
        assert stats.memory_bytes == 0
    
    def test_to_dict(self, solver):
        """Stats convert to a plain dictionary."""
        _, stats = solver.solve(get_puzzle("easy"))
        data = stats.to_dict()
        assert data["status"] == "solved"
        assert data["solved"] is True
        assert data["algorithm"] == StackSolver.name


class TestBranchOrder:
    """Children of a branching step are generated in ascending digit order."""
    
    def test_branch_digits_ascend(self, solver, monkeypatch):
        """Each branch cell yields its guesses from smallest to largest."""
        calls = []
        original = Board.branch
        
        def recording_branch(self, cell, digit):
            calls.append(((id(self), cell.row, cell.col), digit))
            return original(self, cell, digit)
        
        monkeypatch.setattr(Board, "branch", recording_branch)
        _, stats = solver.solve(get_puzzle("hard"))
        
        assert stats.solved
        assert len(calls) == stats.boards_generated - 1
        assert calls
        
        # Consecutive calls on the same parent and cell form one branching step
        steps = []
        for key, digit in calls:
            if steps and steps[-1][0] == key:
                steps[-1][1].append(digit)
            else:
                steps.append((key, [digit]))
        
        for _, digits in steps:
            assert len(digits) >= 2
            assert digits == sorted(digits)
    
    def test_largest_digit_explored_first(self, solver, monkeypatch):
        """The last child pushed, holding the largest guess, is tested next."""
        tested = []
        original = Board.propagate
        
        def recording_propagate(self):
            forced = [c for c in self.pending if len(c.candidates) == 1]
            tested.append(forced[0].candidates.copy() if forced else None)
            return original(self)
        
        monkeypatch.setattr(Board, "propagate", recording_propagate)
        _, stats = solver.solve(np.zeros((9, 9), dtype=np.int32))
        
        assert stats.solved
        # The empty grid branches on (0, 0) over 1-9; 9 is pushed last
        assert tested[1] == {9}


class TestFailures:
    """Invalid, unsolvable and inconsistent outcomes."""
    
    def test_two_fives_in_a_row(self, solver):
        """Two 5s in a row are rejected before any search."""
        grid = get_puzzle("easy")
        grid[0, 2] = 5
        solution, stats = solver.solve(grid)
        
        assert solution is None
        assert stats.status is SolveStatus.INVALID_INPUT
        assert stats.boards_generated == 0
        assert stats.boards_tested == 0
    
    def test_out_of_range_digit(self, solver):
        """A digit 10 is rejected as invalid input."""
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[3, 3] = 10
        solution, stats = solver.solve(grid)
        assert solution is None
        assert stats.status is SolveStatus.INVALID_INPUT
    
    def test_huge_digit(self, solver):
        """A value far past int32 is reported as invalid input, not an overflow."""
        grid = [[0] * 9 for _ in range(9)]
        grid[0][0] = 2 ** 32 + 5
        solution, stats = solver.solve(grid)
        
        assert solution is None
        assert stats.status is SolveStatus.INVALID_INPUT
        assert stats.boards_tested == 0
    
    def test_wrong_shape_raises(self, solver):
        """A grid that is not 9x9 raises ValueError."""
        with pytest.raises(ValueError):
            solver.solve(np.zeros((3, 3), dtype=np.int32))
    
    def test_float_values_raise(self, solver):
        """Fractional digits are rejected rather than truncated."""
        grid = get_puzzle("easy").astype(float)
        grid[0, 2] = 5.7
        with pytest.raises(ValueError):
            solver.solve(grid)
    
    def test_unsolvable(self, solver, contradictory_grid):
        """A stuck puzzle is reported unsolvable after one board."""
        solution, stats = solver.solve(contradictory_grid)
        
        assert solution is None
        assert stats.status is SolveStatus.UNSOLVABLE
        assert not stats.solved
        assert stats.boards_tested == 1
        assert stats.contradictions == 1
    
    def test_unsolvable_after_branching(self, solver):
        """Rows 0 and 1 both need 7, 8 and 9 inside the top-right box."""
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[0, :6] = [1, 2, 3, 4, 5, 6]
        grid[1, :6] = [4, 5, 6, 1, 2, 3]
        solution, stats = solver.solve(grid)
        
        assert solution is None
        assert stats.status is SolveStatus.UNSOLVABLE
        assert stats.contradictions >= 1
    
    def test_internal_inconsistency(self, solver, monkeypatch):
        """A full board that fails validation is never reported as solved."""
        monkeypatch.setattr(Board, "validate", lambda self: self.filled < 81)
        solution, stats = solver.solve(get_puzzle("easy"))
        
        assert solution is None
        assert stats.status is SolveStatus.INTERNAL_INCONSISTENCY
        assert not stats.solved


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
