from __future__ import annotations

from types_sudoku import Puzzle

"""Rendering utilities to draw a puzzle board as an image: box/cell grid lines, givens, user entries and optional wrong-cell tints. Produces the board PNG used by the demo CLI."""


# board_renderer.py
# Render a 9x9 puzzle to a square image; CELL pixels per cell.
import re

from PIL import Image, ImageDraw, ImageFont

CELL = 60

GIVEN_COLOR = (0, 0, 0, 255)
ENTRY_COLOR = (30, 90, 200, 255)
WRONG_FILL = (255, 0, 0, 72)


def parse_cell(key):
    m = re.match(r"r(\d+)c(\d+)", key)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def cell_rect(r, c, cell=CELL, pad=2):
    # r, c are 1-based as in 'r4c7'
    x0 = (c - 1) * cell + pad
    y0 = (r - 1) * cell + pad
    x1 = c * cell - pad
    y1 = r * cell - pad
    return (x0, y0, x1, y1)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_board(puzzle: Puzzle, out_path: str, wrong=None, cell: int = CELL) -> str:
    """Render the puzzle's current state. `wrong` is an optional list of 'r{r}c{c}' keys to tint red. Returns out_path."""
    size = 9 * cell
    im = Image.new("RGBA", (size + 1, size + 1), (255, 255, 255, 255))
    overlay = Image.new("RGBA", im.size, (0, 0, 0, 0))
    d = ImageDraw.Draw(overlay)

    # Givens get a light background so they read as locked
    for view in puzzle.cells():
        if view["fixed"]:
            d.rectangle(cell_rect(view["row"] + 1, view["col"] + 1, cell, pad=0), fill=(230, 230, 230, 255))

    for key in wrong or []:
        rc = parse_cell(key)
        if rc:
            d.rectangle(cell_rect(*rc, cell=cell, pad=0), fill=WRONG_FILL)

    # Thin cell lines, thick box lines
    for i in range(10):
        width = 3 if i % 3 == 0 else 1
        d.line((i * cell, 0, i * cell, size), fill=(0, 0, 0, 255), width=width)
        d.line((0, i * cell, size, i * cell), fill=(0, 0, 0, 255), width=width)

    f = load_font(int(cell * 0.6))
    for view in puzzle.cells():
        if not view["value"]:
            continue
        x0, y0, x1, y1 = cell_rect(view["row"] + 1, view["col"] + 1, cell)
        color = GIVEN_COLOR if view["fixed"] else ENTRY_COLOR
        text = str(view["value"])
        l, t, rt, b = d.textbbox((0, 0), text, font=f)
        x = (x0 + x1 - (rt - l)) // 2 - l
        y = (y0 + y1 - (b - t)) // 2 - t
        d.text((x, y), text, fill=color, font=f)

    out = Image.alpha_composite(im, overlay).convert("RGB")
    out.save(out_path)
    return out_path
