"""Benchmarking harness for the stack solver on the built-in puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

import numpy as np
from tqdm import tqdm

from ..puzzles import PUZZLES
from ..solvers import BaseSolver, StackSolver

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    run: int
    algorithm: str
    status: str
    time_seconds: float
    memory_bytes: int
    boards_generated: int
    boards_tested: int
    contradictions: int
    max_stack_depth: int
    extra: Dict[str, Any] = field(default_factory=dict)
    
    @property
    def solved(self) -> bool:
        return self.status == "solved"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "run": self.run,
            "algorithm": self.algorithm,
            "status": self.status,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "boards_generated": self.boards_generated,
            "boards_tested": self.boards_tested,
            "contradictions": self.contradictions,
            "max_stack_depth": self.max_stack_depth,
            **self.extra
        }


class Benchmark:
    """
    Runs a solver over a set of named puzzles several times and collects
    the search statistics of every run.
    """
    
    def __init__(
        self,
        puzzles: Optional[Dict[str, Any]] = None,
        repeats: int = 3,
        solver: Optional[BaseSolver] = None
    ):
        """
        Initialize the benchmark.
        
        Args:
            puzzles: Dict of puzzle_name -> 9x9 grid (default: built-in set).
            repeats: Number of times each puzzle is solved.
            solver: Solver to measure (default: StackSolver without memory
                    tracking, so timings are not skewed).
        """
        if repeats < 1:
            raise ValueError(f"repeats must be at least 1, got {repeats}")
        self.puzzles = dict(PUZZLES if puzzles is None else puzzles)
        self.repeats = repeats
        self.solver = solver or StackSolver(track_memory=False)
        self.results: List[BenchmarkResult] = []
    
    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.
        
        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * self.repeats
        
        with tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress) as pbar:
            for name, grid in self.puzzles.items():
                for run in range(self.repeats):
                    _, stats = self.solver.solve(grid)
                    self.results.append(BenchmarkResult(
                        puzzle=name,
                        run=run,
                        algorithm=stats.algorithm,
                        status=stats.status.value,
                        time_seconds=stats.time_seconds,
                        memory_bytes=stats.memory_bytes,
                        boards_generated=stats.boards_generated,
                        boards_tested=stats.boards_tested,
                        contradictions=stats.contradictions,
                        max_stack_depth=stats.max_stack_depth,
                        extra=dict(stats.extra)
                    ))
                    pbar.update(1)
        
        return self.results
    
    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics per puzzle from benchmark results."""
        summary = {
            "algorithm": self.solver.name,
            "repeats": self.repeats,
            "puzzles": list(self.puzzles),
            "results_by_puzzle": {}
        }
        
        for name in self.puzzles:
            runs = [r for r in self.results if r.puzzle == name]
            if not runs:
                continue
            times = np.array([r.time_seconds for r in runs])
            # The search is deterministic, so counters agree across runs
            first = runs[0]
            summary["results_by_puzzle"][name] = {
                "status": first.status,
                "solved_runs": sum(r.solved for r in runs),
                "avg_time_seconds": float(times.mean()),
                "min_time_seconds": float(times.min()),
                "max_time_seconds": float(times.max()),
                "boards_generated": first.boards_generated,
                "boards_tested": first.boards_tested,
                "contradictions": first.contradictions,
                "max_stack_depth": first.max_stack_depth,
            }
        
        return summary
    
    def save_results(self, output_dir: str) -> List[str]:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)
        
        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)
        
        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)
        
        logger.info("Results saved to %s", output_dir)
        return [results_file, summary_file]
