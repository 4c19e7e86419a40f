"""Command-line interface for the stack-based Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark
from .benchmark.visualizer import Visualizer
from .core.board import Board
from .puzzles import PUZZLES, DEFAULT_PUZZLE, get_puzzle
from .solvers import StackSolver, SolveStatus


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using constraint propagation and stack-based backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the default built-in puzzle
  python -m stacksudoku.cli solve

  # Solve a puzzle given as a string
  python -m stacksudoku.cli solve --puzzle "530070000600195000..."

  # Benchmark the built-in puzzles
  python -m stacksudoku.cli benchmark --repeats 5 --output results/
        """
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--name", "-n", choices=sorted(PUZZLES), default=DEFAULT_PUZZLE,
        help=f"Built-in puzzle to solve (default: {DEFAULT_PUZZLE})"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log search progress"
    )
    solve_parser.add_argument(
        "--no-memory", action="store_true",
        help="Skip peak memory tracking"
    )
    
    # List command
    subparsers.add_parser("list", help="List the built-in puzzles")
    
    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Benchmark the solver")
    bench_parser.add_argument(
        "--repeats", "-r", type=int, default=3,
        help="Runs per puzzle (default: 3)"
    )
    bench_parser.add_argument(
        "--puzzles", nargs="+", choices=sorted(PUZZLES), default=None,
        help="Built-in puzzles to include (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    
    args = parser.parse_args(argv)
    
    if args.command is None:
        parser.print_help()
        sys.exit(1)
    
    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "list":
        cmd_list(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_solve(args):
    """Handle the solve command."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING
    )
    
    try:
        if args.puzzle is not None:
            board = Board.from_string(args.puzzle)
        else:
            board = Board(get_puzzle(args.name))
    except ValueError as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)
    
    print("Input puzzle:")
    print(board)
    print()
    
    solver = StackSolver(track_memory=not args.no_memory)
    solution, stats = solver.solve(board)
    
    if stats.status is SolveStatus.INVALID_INPUT:
        print("✗ Invalid puzzle")
        sys.exit(1)
    
    if stats.solved:
        print("✓ Solution found!")
    elif stats.status is SolveStatus.UNSOLVABLE:
        print("✗ Puzzle has no solution")
    else:
        print("✗ Solution found, but it's invalid")
    
    print(f"  Boards generated: {stats.boards_generated:,}")
    print(f"  Boards tested: {stats.boards_tested:,}")
    print(f"  Time elapsed: {stats.time_seconds * 1000:.1f} ms")
    if not args.no_memory:
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    if solution is not None:
        print(solution)
    
    if stats.status is SolveStatus.INTERNAL_INCONSISTENCY:
        sys.exit(2)


def cmd_list(args):
    """Handle the list command."""
    for name in sorted(PUZZLES):
        clues = sum(1 for row in PUZZLES[name] for v in row if v)
        marker = " (default)" if name == DEFAULT_PUZZLE else ""
        print(f"{name:<10} {clues:>2} clues{marker}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    puzzles = {name: PUZZLES[name] for name in (args.puzzles or PUZZLES)}
    
    print("=" * 60)
    print("STACK SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(puzzles)}")
    print(f"Runs per puzzle: {args.repeats}")
    print(f"Output directory: {args.output}")
    print("=" * 60)
    
    benchmark = Benchmark(puzzles=puzzles, repeats=args.repeats)
    results = benchmark.run()
    summary = benchmark.get_summary()
    
    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for name, stats in summary["results_by_puzzle"].items():
        print(f"\n{name}:")
        print(f"  Status: {stats['status']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Boards generated: {stats['boards_generated']:,}")
        print(f"  Boards tested: {stats['boards_tested']:,}")
        print(f"  Max stack depth: {stats['max_stack_depth']:,}")
    
    benchmark.save_results(args.output)
    print(f"\nResults saved to {args.output}/")
    
    if not args.no_charts:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")
    
    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
