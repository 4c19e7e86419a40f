"""Charts for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Draws the benchmark's timing and search-size statistics per puzzle.
    """
    
    GENERATED_COLOR = "#3498db"
    TESTED_COLOR = "#e74c3c"
    
    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        
        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")
    
    def _puzzles(self) -> List[str]:
        # Keep first-seen order rather than sorting
        return list(dict.fromkeys(r.puzzle for r in self.results))
    
    def generate_all(self) -> List[str]:
        """
        Generate all charts.
        
        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_boards_comparison(),
        ]
    
    def plot_time_comparison(self) -> str:
        """Bar chart of average solve time per puzzle."""
        fig, ax = plt.subplots(figsize=(10, 6))
        
        puzzles = self._puzzles()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.puzzle == p])
            for p in puzzles
        ]
        
        bars = ax.bar(puzzles, avg_times, color=sns.color_palette("husl", len(puzzles)),
                      edgecolor='black', linewidth=0.5)
        
        for bar, time in zip(bars, avg_times):
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)
        
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Puzzle', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        
        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        
        return path
    
    def plot_boards_comparison(self) -> str:
        """Grouped bars of boards generated and boards tested per puzzle."""
        fig, ax = plt.subplots(figsize=(12, 6))
        
        puzzles = self._puzzles()
        first_runs = {p: next(r for r in self.results if r.puzzle == p) for p in puzzles}
        generated = [first_runs[p].boards_generated for p in puzzles]
        tested = [first_runs[p].boards_tested for p in puzzles]
        
        x = np.arange(len(puzzles))
        width = 0.4
        ax.bar(x - width / 2, generated, width, label='Generated',
               color=self.GENERATED_COLOR, edgecolor='black', linewidth=0.5)
        ax.bar(x + width / 2, tested, width, label='Tested',
               color=self.TESTED_COLOR, edgecolor='black', linewidth=0.5)
        
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles)
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Boards', fontsize=12)
        ax.set_title('Search Size by Puzzle', fontsize=14, fontweight='bold')
        ax.legend()
        
        if max(generated, default=0) > 1000:
            ax.set_yscale('log')
        
        plt.tight_layout()
        path = os.path.join(self.output_dir, "boards_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        
        return path
