# sudoku_tool_api.py
# Optional FastAPI wrapper for the game tool functions.
# Stateless: every request carries the grids it works on.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI
from pydantic import BaseModel, Field, field_validator
from typing import Any, List, Optional

from solver.sudoku_tools import (
    new_game_tool, set_cell_tool, check_solution_tool, sanity_check,
)

app = FastAPI(title="Sudoku Game Tool API")


def _check_grid(grid: List[List[int]]) -> List[List[int]]:
    if len(grid) != 9 or any(len(row) != 9 for row in grid):
        raise ValueError("grid must be 9x9")
    if any(v < 0 or v > 9 for row in grid for v in row):
        raise ValueError("grid values must be 0..9")
    return grid


class NewGameRequest(BaseModel):
    difficulty: Optional[str] = "easy"
    seed: Optional[int] = None

class SetCellRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]
    row: int = Field(ge=0, le=8)
    col: int = Field(ge=0, le=8)
    value: Any = None  # raw input; the engine decides what counts as a digit

    @field_validator("original", "current")
    @classmethod
    def grid_shape(cls, v):
        return _check_grid(v)

class CheckSolutionRequest(BaseModel):
    current: List[List[int]]
    solution: List[List[int]]

    @field_validator("current", "solution")
    @classmethod
    def grid_shape(cls, v):
        return _check_grid(v)

class SanityCheckRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]

    @field_validator("original", "current")
    @classmethod
    def grid_shape(cls, v):
        return _check_grid(v)

@app.get("/health")
def api_health():
    return {"ok": True}

@app.post("/new_game")
def api_new_game(req: NewGameRequest):
    return new_game_tool(req.difficulty, req.seed)

@app.post("/set_cell")
def api_set_cell(req: SetCellRequest):
    return set_cell_tool(req.original, req.current, req.row, req.col, req.value)

@app.post("/check_solution")
def api_check(req: CheckSolutionRequest):
    return check_solution_tool(req.current, req.solution)

@app.post("/sanity_check")
def api_sanity(req: SanityCheckRequest):
    return sanity_check(req.original, req.current)
