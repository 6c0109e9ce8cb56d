from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class BBox:
    # Half-open pixel box: x1/y1 are one past the last column/row.
    x0: int
    y0: int
    x1: int
    y1: int

    def width(self) -> int:
        return int(self.x1 - self.x0)

    def height(self) -> int:
        return int(self.y1 - self.y0)

    def union(self, other: "BBox") -> "BBox":
        return BBox(
            x0=min(self.x0, other.x0),
            y0=min(self.y0, other.y0),
            x1=max(self.x1, other.x1),
            y1=max(self.y1, other.y1),
        )

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "BBox":
        return BBox(x0=int(d["x0"]), y0=int(d["y0"]), x1=int(d["x1"]), y1=int(d["y1"]))

    def to_dict(self) -> dict[str, Any]:
        return {"x0": self.x0, "y0": self.y0, "x1": self.x1, "y1": self.y1}


@dataclass(frozen=True, slots=True)
class Line:
    """
    A maximal horizontal run of pixels on one image row.

    `x` is the column of the first pixel, `y` the row (top row is 0) and
    `length` the number of pixels in the run.
    """

    x: int
    y: int
    length: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Line coordinates must be >= 0, got x={self.x} y={self.y}")
        if self.length < 1:
            raise ValueError(f"Line length must be >= 1, got {self.length}")

    @property
    def x_end(self) -> int:
        return self.x + self.length

    def sort_key(self) -> tuple[int, int]:
        # Row-major: y asc, then x asc.
        return (self.y, self.x)

    def bbox(self) -> BBox:
        return BBox(x0=self.x, y0=self.y, x1=self.x_end, y1=self.y + 1)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "length": self.length}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Line":
        return Line(x=int(d["x"]), y=int(d["y"]), length=int(d["length"]))
