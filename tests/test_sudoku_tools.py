# tests/test_sudoku_tools.py
import random

import pytest

from types_sudoku import Puzzle
from solver.solver_core import is_solved_grid, count_filled, clone_grid, empty_grid
from solver.sudoku_tools import (
    new_game, new_session, set_cell, check_solution, parse_cell_input, sanity_check,
    format_grid, new_game_tool, set_cell_tool, check_solution_tool, SudokuGame,
)


def _first_cell(puzzle, fixed):
    return next(v for v in puzzle.cells() if v["fixed"] == fixed)


@pytest.mark.parametrize("tier,clues", [("easy", 55), ("medium", 40), ("hard", 25), ("unknown", 55), (None, 55)])
def test_new_game_clue_counts(tier, clues, rng):
    puzzle, solution = new_game(tier, rng)
    assert is_solved_grid(solution)
    assert sum(v["fixed"] for v in puzzle.cells()) == clues
    assert count_filled(puzzle.current) == clues
    for v in puzzle.cells():
        if v["fixed"]:
            assert v["value"] == solution[v["row"]][v["col"]]
        else:
            assert v["value"] == 0


def test_check_solution_identical_grid(solved):
    assert check_solution(solved, solved)
    assert check_solution(Puzzle(original=empty_grid(), current=clone_grid(solved)), solved)


def test_check_solution_single_wrong_digit(solved):
    g = clone_grid(solved)
    g[6][2] = g[6][2] % 9 + 1
    assert not check_solution(g, solved)


@pytest.mark.parametrize("raw", [0, 10, -1, "x", "", " ", "-1", "10", None, True, 5.0, "3.5"])
def test_set_cell_rejects_bad_input(raw, rng):
    puzzle, _ = new_game("hard", rng)
    cell = _first_cell(puzzle, fixed=False)
    p2 = set_cell(puzzle, cell["row"], cell["col"], 4)
    assert p2.current[cell["row"]][cell["col"]] == 4
    p3 = set_cell(p2, cell["row"], cell["col"], raw)
    assert p3.current[cell["row"]][cell["col"]] == 0


def test_parse_cell_input():
    assert parse_cell_input(7) == 7
    assert parse_cell_input(" 3 ") == 3
    assert parse_cell_input("9") == 9
    assert parse_cell_input("5a") is None
    assert parse_cell_input(False) is None


def test_set_cell_ignores_fixed_cells(rng):
    puzzle, _ = new_game("easy", rng)
    cell = _first_cell(puzzle, fixed=True)
    other = cell["value"] % 9 + 1
    for raw in (other, "x", 0, None):
        p2 = set_cell(puzzle, cell["row"], cell["col"], raw)
        assert p2.current[cell["row"]][cell["col"]] == cell["value"]


def test_set_cell_returns_copy_and_ignores_out_of_range(rng):
    puzzle, _ = new_game("medium", rng)
    before = clone_grid(puzzle.current)
    cell = _first_cell(puzzle, fixed=False)
    set_cell(puzzle, cell["row"], cell["col"], 1)
    assert puzzle.current == before
    assert set_cell(puzzle, 9, 0, 1).current == before
    assert set_cell(puzzle, -1, 3, 1).current == before


def test_hard_scenario(rng):
    puzzle, solution = new_game("hard", rng)
    assert count_filled(puzzle.current) == 25
    assert not check_solution(puzzle, solution)
    blanks = [v for v in puzzle.cells() if not v["fixed"]]
    assert len(blanks) == 56
    for v in blanks:
        puzzle = set_cell(puzzle, v["row"], v["col"], solution[v["row"]][v["col"]])
    assert check_solution(puzzle, solution)


def test_sanity_check_reports_duplicates_and_overwrites(solved):
    original = clone_grid(solved)
    original[0][1] = 0
    current = clone_grid(solved)
    assert sanity_check(original, current)["ok"]

    current[0][0] = current[0][1]  # overwrite a given with a duplicate
    report = sanity_check(original, current)
    assert not report["ok"]
    types = {i["type"] for i in report["issues"]}
    assert types == {"given_overwritten", "duplicate"}
    units = {i.get("unit") for i in report["issues"] if i["type"] == "duplicate"}
    assert "r1" in units and "b1" in units
    overwritten = [i for i in report["issues"] if i["type"] == "given_overwritten"]
    assert overwritten[0]["cell"] == "r1c1"


def test_format_grid(solved):
    text = format_grid(solved)
    lines = text.splitlines()
    assert len(lines) == 11
    assert lines[3] == "------+-------+------"
    assert lines[0].count("|") == 2
    assert "." in format_grid(empty_grid())


def test_tool_payloads():
    payload = new_game_tool("hard", seed=3)
    assert payload == new_game_tool("HARD", seed=3)
    assert payload["difficulty"] == "hard" and payload["clues"] == 25
    assert payload["original"] == payload["current"]

    r, c = next((r, c) for r in range(9) for c in range(9) if payload["original"][r][c] == 0)
    out = set_cell_tool(payload["original"], payload["current"], r, c, str(payload["solution"][r][c]))
    assert out["current"][r][c] == payload["solution"][r][c]
    assert payload["current"][r][c] == 0

    assert check_solution_tool(payload["solution"], payload["solution"]) == {
        "ok": True, "title": "Congratulations!", "text": "Sudoku is correct."}
    assert check_solution_tool(payload["current"], payload["solution"])["ok"] is False


def test_unknown_tier_session_is_easy(rng):
    session = new_session("legendary", rng)
    assert session.difficulty == "easy"
    assert count_filled(session.puzzle.original) == 55


def test_game_state_machine():
    game = SudokuGame(random.Random(5))
    assert game.state == "uninitialized"
    assert game.check() is False
    assert game.set_cell(0, 0, 1) is False
    assert game.conflicts() == []

    first = game.new_game("medium")
    assert game.state == "ready"
    cell = _first_cell(first.puzzle, fixed=False)
    assert game.set_cell(cell["row"], cell["col"], first.solution[cell["row"]][cell["col"]])
    given = _first_cell(first.puzzle, fixed=True)
    assert game.set_cell(given["row"], given["col"], given["value"] % 9 + 1) is False

    second = game.new_game("hard")
    assert game.session is second
    assert second is not first
    assert count_filled(second.puzzle.current) == 25
    assert game.state == "ready"


def test_game_check_after_filling():
    game = SudokuGame(random.Random(11))
    session = game.new_game("easy")
    assert not game.check()
    for v in list(session.puzzle.cells()):
        if not v["fixed"]:
            game.set_cell(v["row"], v["col"], session.solution[v["row"]][v["col"]])
    assert game.check()
    assert game.conflicts() == []


@pytest.mark.parametrize("raw", ["1" * 5000, "0" * 4999 + "5", "007", " 0005 "])
def test_set_cell_clears_on_long_digit_strings(raw, rng):
    puzzle, _ = new_game("hard", rng)
    cell = _first_cell(puzzle, fixed=False)
    p2 = set_cell(set_cell(puzzle, cell["row"], cell["col"], 6), cell["row"], cell["col"], raw)
    assert p2.current[cell["row"]][cell["col"]] == 0
    assert parse_cell_input(raw) is None
    assert parse_cell_input("07") == 7
