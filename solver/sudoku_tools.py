from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from types_sudoku import Grid, Puzzle, Session
"""Game-level helpers: new game generation, guarded cell edits, solution checking and board sanity reports. Also provides the tool-friendly dict interface used by the API and the CLIs."""


# sudoku_tools.py
import random

from .solver_core import (
    SIZE, BOX, EMPTY, clone_grid, in_bounds, rc_to_key,
)
from .generator import generate_solution, mask_puzzle, normalize_difficulty, clue_count

CORRECT_FEEDBACK = {"title": "Congratulations!", "text": "Sudoku is correct."}
INCORRECT_FEEDBACK = {"title": "Oops!", "text": "Sudoku is incorrect."}


def parse_cell_input(value: Any) -> Optional[int]:
    """Return the digit 1..9 carried by raw cell input, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        # one digit, maybe zero-padded; longer strings never hold 1..9
        if len(value) > 2 or not value.isdecimal():
            return None
        value = int(value)
    if isinstance(value, int) and 1 <= value <= 9:
        return value
    return None


def new_game(difficulty=None, rng=None) -> Tuple[Puzzle, Grid]:
    """Generate a solution and the puzzle masked from it for the given tier."""
    solution = generate_solution(rng)
    original = mask_puzzle(solution, difficulty, rng)
    return Puzzle(original=original, current=clone_grid(original)), solution


def new_session(difficulty=None, rng=None) -> Session:
    puzzle, solution = new_game(difficulty, rng)
    return Session(difficulty=normalize_difficulty(difficulty), puzzle=puzzle, solution=solution)


def set_cell(puzzle: Puzzle, row: int, col: int, value: Any) -> Puzzle:
    """Return a new Puzzle with the edit applied.

    Fixed cells and out-of-board coordinates are left alone. Input that is not
    a digit 1..9 clears the (editable) cell. The solution is never consulted.
    """
    p2 = Puzzle(original=clone_grid(puzzle.original), current=clone_grid(puzzle.current))
    if not in_bounds(row, col) or p2.is_fixed(row, col):
        return p2
    digit = parse_cell_input(value)
    p2.current[row][col] = EMPTY if digit is None else digit
    return p2


def check_solution(puzzle, solution: Grid) -> bool:
    """True iff every cell of the puzzle (a Puzzle or a bare grid) matches the solution."""
    grid = puzzle.current if isinstance(puzzle, Puzzle) else puzzle
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] != solution[r][c]:
                return False
    return True


def format_grid(grid: Grid) -> str:
    """Plain-text board: '.' for blanks, bars and rules between boxes."""
    lines = []
    for r in range(SIZE):
        if r and r % BOX == 0:
            lines.append("------+-------+------")
        parts = []
        for c in range(SIZE):
            if c and c % BOX == 0:
                parts.append("|")
            parts.append(str(grid[r][c]) if grid[r][c] != EMPTY else ".")
        lines.append(" ".join(parts))
    return "\n".join(lines)


def sanity_check(original:Grid, current:Grid)->Dict:
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != EMPTY and current[r][c] != original[r][c]:
                issues.append({"type":"given_overwritten","cell":rc_to_key(r, c),
                               "given": original[r][c], "found": current[r][c]})
    def duplicates_in_unit(vals):
        seen=set(); dups=set()
        for v in vals:
            if v==EMPTY: continue
            if v in seen: dups.add(v)
            seen.add(v)
        return dups
    # rows
    for r in range(SIZE):
        dups = duplicates_in_unit(current[r])
        if dups:
            cells = [rc_to_key(r, c) for c in range(SIZE) if current[r][c] in dups]
            issues.append({"type":"duplicate","unit":f"r{r+1}","digits":sorted(dups),"cells":cells})
    # cols
    for c in range(SIZE):
        col = [current[r][c] for r in range(SIZE)]
        dups = duplicates_in_unit(col)
        if dups:
            cells = [rc_to_key(r, c) for r in range(SIZE) if current[r][c] in dups]
            issues.append({"type":"duplicate","unit":f"c{c+1}","digits":sorted(dups),"cells":cells})
    # boxes
    for b in range(SIZE):
        br = b//BOX; bc=b%BOX
        cells = []
        vals = []
        for i in range(BOX):
            for j in range(BOX):
                r = BOX*br+i; c = BOX*bc+j
                cells.append(rc_to_key(r, c))
                vals.append(current[r][c])
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [cells[i] for i,v in enumerate(vals) if v in dups]
            issues.append({"type":"duplicate","unit":f"b{b+1}","digits":sorted(dups),"cells":bad})
    return {"ok": len(issues)==0, "issues": issues}


def new_game_tool(difficulty: Optional[str] = None, seed: Optional[int] = None) -> Dict:
    """Generate a game and return it as a JSON-ready dict (original, current, solution, clues)."""
    rng = random.Random(seed) if seed is not None else None
    session = new_session(difficulty, rng)
    return session_payload(session)


def session_payload(session: Session) -> Dict:
    return {
        "difficulty": session.difficulty,
        "clues": clue_count(session.difficulty),
        "original": session.puzzle.original,
        "current": session.puzzle.current,
        "solution": session.solution,
    }


def set_cell_tool(original:Grid, current:Grid, row:int, col:int, value:Any)->Dict:
    p2 = set_cell(Puzzle(original=original, current=current), row, col, value)
    return {"current": p2.current}


def check_solution_tool(current:Grid, solution:Grid)->Dict:
    ok = check_solution(current, solution)
    return {"ok": ok, **(CORRECT_FEEDBACK if ok else INCORRECT_FEEDBACK)}


class SudokuGame:
    """Holds the one live Session of a front-end. Starts uninitialized; every
    new_game call swaps in a fresh puzzle/solution pair, dropping any edits.
    """

    def __init__(self, rng=None):
        self.rng = rng
        self.session: Optional[Session] = None

    @property
    def state(self) -> str:
        return "uninitialized" if self.session is None else "ready"

    def new_game(self, difficulty=None) -> Session:
        self.session = new_session(difficulty, self.rng)
        return self.session

    def set_cell(self, row: int, col: int, value: Any) -> bool:
        """Apply an edit; returns True if the stored cell value changed."""
        if self.session is None:
            return False
        before = self.session.puzzle.current[row][col] if in_bounds(row, col) else None
        self.session.puzzle = set_cell(self.session.puzzle, row, col, value)
        if before is None:
            return False
        return self.session.puzzle.current[row][col] != before

    def check(self) -> bool:
        if self.session is None:
            return False
        return check_solution(self.session.puzzle, self.session.solution)

    def conflicts(self) -> List[Dict]:
        if self.session is None:
            return []
        return sanity_check(self.session.puzzle.original, self.session.puzzle.current)["issues"]
