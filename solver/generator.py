"""Puzzle generation: randomized backtracking fill of an empty grid, then clue masking by difficulty tier."""

# generator.py
# - generate_solution: fills an empty grid column by column (rows advance fastest),
#   trying a fresh random permutation of 1..9 at every cell and undoing on dead ends.
# - mask_puzzle: clears random cells of a copy of the solution until the tier's
#   clue count remains. No uniqueness check.
# `rng` is anything with shuffle/randrange: a random.Random or the random module.
from __future__ import annotations

import random

from types_sudoku import Grid
from .solver_core import SIZE, EMPTY, DIGITS, clone_grid, empty_grid, is_valid_placement

CLUE_COUNTS = {
    "easy": 55,
    "medium": 40,
    "hard": 25,
}
DEFAULT_DIFFICULTY = "easy"


def normalize_difficulty(tier) -> str:
    """Map user/tier input to a known tier name; anything unrecognized is 'easy'."""
    if isinstance(tier, str):
        key = tier.strip().lower()
        if key in CLUE_COUNTS:
            return key
    return DEFAULT_DIFFICULTY


def clue_count(tier) -> int:
    return CLUE_COUNTS[normalize_difficulty(tier)]


def _fill(grid: Grid, row: int, col: int, rng) -> bool:
    if row == SIZE:
        row = 0
        col += 1
        if col == SIZE:
            return True

    nums = list(DIGITS)
    rng.shuffle(nums)
    for v in nums:
        if is_valid_placement(grid, row, col, v):
            grid[row][col] = v
            if _fill(grid, row + 1, col, rng):
                return True
            grid[row][col] = EMPTY
    return False


def generate_solution(rng=None) -> Grid:
    """Return a freshly generated, completely filled and valid 9x9 grid.

    Every call explores digits in a new random order, so successive grids
    differ unless a seeded `rng` is passed.
    """
    rng = rng or random
    grid = empty_grid()
    # An empty board always completes; a False here would mean a broken validator.
    _fill(grid, 0, 0, rng)
    return grid


def mask_puzzle(solution: Grid, tier, rng=None) -> Grid:
    """Return a copy of `solution` with all but clue_count(tier) cells cleared."""
    rng = rng or random
    puzzle = clone_grid(solution)
    to_clear = SIZE * SIZE - clue_count(tier)
    while to_clear > 0:
        r = rng.randrange(SIZE)
        c = rng.randrange(SIZE)
        if puzzle[r][c] != EMPTY:
            puzzle[r][c] = EMPTY
            to_clear -= 1
    return puzzle
