"""CLI entry for the demo pipeline. Generates a game for a difficulty tier, optionally fills it from the solution and checks it, renders a board PNG, and prints a JSON report to stdout."""

# demo_cli.py
# End-to-end demo:
# - Loads defaults from a YAML config (optional), CLI flags win
# - Generates a solution and masks it to the tier's clue count
# - Optionally fills every blank from the solution (--solve) and runs the checker
# - Optionally renders the board to an image (--png)
#
# Usage:
#   python -m apps.cli.demo_cli --difficulty hard --seed 123 --solve --png board.png

import argparse
import json
import random
import time
from pathlib import Path

from solver.config import load_config
from solver.sudoku_tools import (
    new_session, session_payload, set_cell, check_solution_tool, sanity_check, format_grid,
)
from .board_renderer import render_board
from .cli_log import log


def fill_from_solution(session):
    """Type every missing digit into the session's puzzle, exactly as a player would."""
    puzzle = session.puzzle
    for view in list(puzzle.cells()):
        if not view["fixed"]:
            puzzle = set_cell(puzzle, view["row"], view["col"], session.solution[view["row"]][view["col"]])
    session.puzzle = puzzle
    return session


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate a Sudoku game and print it as JSON.")
    ap.add_argument("--config", type=str, default=None, help="YAML file with difficulty/seed/render defaults")
    ap.add_argument("--difficulty", type=str, default=None, help="easy | medium | hard")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--solve", action="store_true", help="fill blanks from the solution and check")
    ap.add_argument("--png", type=str, default=None, help="write a board image here")
    ap.add_argument("--json", type=str, default=None, help="write the report here instead of stdout")
    ap.add_argument("--quiet", action="store_true")
    return ap


def main(args=None) -> dict:
    if args is None:
        args = build_parser().parse_args()

    cfg = load_config(args.config, difficulty=args.difficulty, seed=args.seed)
    rng = random.Random(cfg.seed) if cfg.seed is not None else None

    t0 = time.time()
    session = new_session(cfg.difficulty, rng)
    log(f"generated {session.difficulty} board in {time.time() - t0:.3f}s (seed={cfg.seed})", quiet=args.quiet)
    log("puzzle:\n" + format_grid(session.puzzle.current), quiet=args.quiet)

    if args.solve:
        fill_from_solution(session)

    payload = session_payload(session)
    payload["check"] = check_solution_tool(session.puzzle.current, session.solution)
    payload["sanity"] = sanity_check(session.puzzle.original, session.puzzle.current)
    log(f"check: {payload['check']['title']} {payload['check']['text']}", quiet=args.quiet)

    if args.png:
        out = Path(args.png)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload["png"] = render_board(session.puzzle, str(out), cell=int(cfg.render["cell"]))
        log(f"wrote {out}", quiet=args.quiet)

    if args.json:
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
    else:
        print(json.dumps(payload, indent=2))
    return payload


if __name__ == "__main__":
    main()  # <- no args passed; main() will parse
