"""Line-oriented terminal front-end for playing a generated puzzle."""

# play_cli.py
# Commands (rows/cols are 1-based):
#   set R C V   place digit V at row R, column C
#   clear R C   erase an entry
#   check       compare the board with the solution
#   new TIER    start over with easy | medium | hard
#   show | conflicts | help | quit
#
# Usage:
#   python -m apps.cli.play_cli --difficulty medium --seed 7
from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterable

from solver.config import load_config
from solver.sudoku_tools import SudokuGame, format_grid, CORRECT_FEEDBACK, INCORRECT_FEEDBACK
from .cli_log import log

HELP = "commands: set R C V | clear R C | check | new easy|medium|hard | show | conflicts | help | quit"


def _cell_args(parts):
    try:
        return int(parts[0]) - 1, int(parts[1]) - 1
    except (IndexError, ValueError):
        return None


def play(game: SudokuGame, lines: Iterable[str], write: Callable[[str], None] = print) -> bool:
    """Drive `game` from text commands; returns the last check result."""
    solved = False
    write(format_grid(game.session.puzzle.current))
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        cmd, rest = parts[0].lower(), parts[1:]
        if cmd in ("quit", "exit", "q"):
            break
        elif cmd == "help":
            write(HELP)
        elif cmd == "show":
            write(format_grid(game.session.puzzle.current))
        elif cmd in ("set", "clear"):
            rc = _cell_args(rest)
            if rc is None:
                write(HELP)
                continue
            value = rest[2] if cmd == "set" and len(rest) > 2 else None
            r, c = rc
            if 0 <= r < 9 and 0 <= c < 9 and game.session.puzzle.is_fixed(r, c):
                write(f"r{r + 1}c{c + 1} is a given")
                continue
            game.set_cell(r, c, value)
            write(format_grid(game.session.puzzle.current))
        elif cmd == "check":
            solved = game.check()
            fb = CORRECT_FEEDBACK if solved else INCORRECT_FEEDBACK
            write(f"{fb['title']} {fb['text']}")
        elif cmd == "new":
            tier = rest[0] if rest else None
            session = game.new_game(tier)
            solved = False
            write(f"new {session.difficulty} game")
            write(format_grid(session.puzzle.current))
        elif cmd == "conflicts":
            issues = game.conflicts()
            if not issues:
                write("no conflicts")
            for issue in issues:
                write(f"{issue.get('unit', issue.get('cell'))}: {issue['type']} {issue.get('digits', issue.get('found'))}")
        else:
            write(HELP)
    return solved


def main(args=None) -> bool:
    if args is None:
        ap = argparse.ArgumentParser(description="Play Sudoku in the terminal.")
        ap.add_argument("--config", type=str, default=None)
        ap.add_argument("--difficulty", type=str, default=None)
        ap.add_argument("--seed", type=int, default=None)
        ap.add_argument("--quiet", action="store_true")
        args = ap.parse_args()

    cfg = load_config(args.config, difficulty=args.difficulty, seed=args.seed)
    game = SudokuGame(random.Random(cfg.seed) if cfg.seed is not None else None)
    session = game.new_game(cfg.difficulty)
    log(f"{session.difficulty} game ready; {HELP}", quiet=args.quiet)
    return play(game, sys.stdin)


if __name__ == "__main__":
    main()
