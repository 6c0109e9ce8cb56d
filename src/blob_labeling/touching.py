from __future__ import annotations

from blob_contracts.geometry import Line


def columns_overlap(a: Line, b: Line) -> bool:
    return a.x < b.x_end and b.x < a.x_end


def lines_touch(a: Line, b: Line) -> bool:
    # Rows exactly one apart and at least one shared column. No diagonals.
    return abs(a.y - b.y) == 1 and columns_overlap(a, b)
