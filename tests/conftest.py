"""Shared puzzles for the test suites."""

import numpy as np
import pytest


# Classic puzzle with a unique solution
EASY_PUZZLE = (
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

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def to_grid(s: str) -> np.ndarray:
    return np.array([int(c) for c in s], dtype=np.int32).reshape(9, 9)


@pytest.fixture
def empty_grid():
    return np.zeros((9, 9), dtype=np.int32)


@pytest.fixture
def easy_grid():
    return to_grid(EASY_PUZZLE)


@pytest.fixture
def contradictory_grid():
    """(0, 7) and (0, 8) both start with only 8 as a candidate."""
    grid = np.zeros((9, 9), dtype=np.int32)
    grid[0, :7] = [1, 2, 3, 4, 5, 6, 7]
    grid[3, 7] = 9
    grid[6, 8] = 9
    return grid
