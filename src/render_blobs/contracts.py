from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class RenderFormat(str, Enum):
    ASCII = "ascii"
    PNG = "png"


@dataclass(frozen=True, slots=True)
class RenderError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """
    Rendering parameters.

    - ASCII renders in memory; `out_file` additionally writes the rows as text.
    - PNG always writes a file, so `out_file` is required.
    """

    format: RenderFormat = RenderFormat.ASCII
    out_file: Path | None = None
    scale: int = 1  # PNG only: output pixels per image pixel

    def __post_init__(self) -> None:
        if not isinstance(self.format, RenderFormat):
            raise TypeError("format must be a RenderFormat")
        if self.out_file is not None and not isinstance(self.out_file, Path):
            raise TypeError("out_file must be pathlib.Path or None")
        if self.scale < 1:
            raise ValueError("scale must be a positive integer")
        if self.format == RenderFormat.PNG and self.out_file is None:
            raise ValueError("PNG rendering requires out_file")


@dataclass(frozen=True, slots=True)
class RenderResult:
    ok: bool
    format: RenderFormat
    width: int
    height: int
    rows: list[str] | None  # ASCII only
    out_file: str | None  # set only when a file was written
    errors: list[RenderError]
    meta: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "format": self.format.value,
            "width": self.width,
            "height": self.height,
            "rows": None if self.rows is None else list(self.rows),
            "out_file": self.out_file,
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
        }
