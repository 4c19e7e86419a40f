"""Built-in puzzles used by the CLI, the benchmark and the tests."""

from __future__ import annotations
from typing import Dict, List

import numpy as np

CLASSIC = [
    [1, 0, 6, 0, 0, 0, 0, 3, 0],
    [0, 2, 0, 0, 1, 8, 4, 0, 0],
    [0, 0, 0, 7, 0, 0, 0, 0, 0],
    [3, 0, 0, 0, 7, 5, 0, 4, 0],
    [0, 0, 0, 2, 0, 0, 7, 0, 0],
    [0, 5, 0, 9, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 9, 0, 0, 0],
    [0, 8, 0, 0, 5, 4, 1, 0, 0],
    [2, 0, 0, 0, 0, 0, 0, 0, 8],
]

EMPTY = [[0] * 9 for _ in range(9)]

EASY = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

HARD = (
    "000000000"
    "000003085"
    "001020000"
    "000507000"
    "004000100"
    "090000000"
    "500000073"
    "002010000"
    "000040009"
)

DEFAULT_PUZZLE = "classic"


def _parse(s: str) -> List[List[int]]:
    return [[int(c) for c in s[i:i + 9]] for i in range(0, 81, 9)]


PUZZLES: Dict[str, List[List[int]]] = {
    "classic": CLASSIC,
    "empty": EMPTY,
    "easy": _parse(EASY),
    "hard": _parse(HARD),
}


def get_puzzle(name: str = DEFAULT_PUZZLE) -> np.ndarray:
    """
    Look up a built-in puzzle.
    
    Args:
        name: One of the keys of ``PUZZLES``.
        
    Returns:
        A fresh 9x9 int32 array (0 for blanks).
    """
    if name not in PUZZLES:
        raise KeyError(f"Unknown puzzle {name!r}, choose from {sorted(PUZZLES)}")
    return np.array(PUZZLES[name], dtype=np.int32)
