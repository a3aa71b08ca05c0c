"""Core Sudoku utilities used by the generator and the game tools: index math, house values, placement validity and grid copies."""

# solver_core.py
# Board primitives:
# - index helpers and 'r1c1' cell keys
# - row / column / box value sets
# - placement validity (the generator's only constraint check)
# - full-grid validity
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Row/col indices are 0-based.

from types_sudoku import Grid

SIZE = 9
BOX = 3
EMPTY = 0
DIGITS = range(1, SIZE + 1)

Cell = tuple[int, int]  # (row, col) 0-based


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def empty_grid() -> Grid:
    return [[EMPTY] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(r: int, c: int) -> Cell:
    return (r - r % BOX, c - c % BOX)


def row_values(grid: Grid, r: int) -> set:
    return set(grid[r]) - {EMPTY}


def col_values(grid: Grid, c: int) -> set:
    return {grid[i][c] for i in range(SIZE)} - {EMPTY}


def box_values(grid: Grid, r: int, c: int) -> set:
    r0, c0 = box_origin(r, c)
    return {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} - {EMPTY}


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v != EMPTY)


def is_valid_placement(grid: Grid, r: int, c: int, value: int) -> bool:
    """Return True if `value` at (r, c) clashes with nothing else in its row, column or box.

    The target cell itself is never compared, so the check holds whether
    grid[r][c] is empty or already equal to `value`.
    """
    for j in range(SIZE):
        if j != c and grid[r][j] == value:
            return False
    for i in range(SIZE):
        if i != r and grid[i][c] == value:
            return False
    r0, c0 = box_origin(r, c)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if (i, j) != (r, c) and grid[i][j] == value:
                return False
    return True


def is_solved_grid(grid: Grid) -> bool:
    """True if every row, column and box holds each digit 1..9 exactly once."""
    full = set(DIGITS)
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False
    for i in range(SIZE):
        if row_values(grid, i) != full or col_values(grid, i) != full:
            return False
    for r0 in range(0, SIZE, BOX):
        for c0 in range(0, SIZE, BOX):
            if box_values(grid, r0, c0) != full:
                return False
    return True
