# types_sudoku.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Difficulty = Literal["easy", "medium", "hard"]
"""Named difficulty tier; controls how many clues survive masking."""


class CellView(TypedDict):
    """One cell as handed to a renderer (CLI, API client, PNG overlay)."""

    row: int  # 0-based
    col: int  # 0-based
    key: str  # e.g., 'r4c7' (1-based)
    value: int  # 0 = empty
    fixed: bool  # True for givens placed by the generator


@dataclass
class Puzzle:
    """A playable board: the givens as generated plus the user's entries.

    A cell is fixed iff ``original`` holds a digit there; ``current`` always
    agrees with ``original`` on fixed cells.
    """

    original: Grid
    current: Grid

    def is_fixed(self, row: int, col: int) -> bool:
        return self.original[row][col] != 0

    def cells(self) -> Iterator[CellView]:
        for r in range(9):
            for c in range(9):
                yield {
                    "row": r,
                    "col": c,
                    "key": f"r{r + 1}c{c + 1}",
                    "value": self.current[r][c],
                    "fixed": self.is_fixed(r, c),
                }


@dataclass
class Session:
    """The puzzle/solution pair of one game; replaced wholesale on a new game."""

    difficulty: str
    puzzle: Puzzle
    solution: Grid
