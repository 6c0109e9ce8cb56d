from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from blob_contracts.geometry import Line

BACKGROUND = "."
FIRST_LETTER = "A"
LAST_LETTER = "Z"


@dataclass(frozen=True, slots=True)
class DecodeError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class DecodeResult:
    ok: bool
    errors: list[DecodeError]
    lines: list[Line]  # row-major by construction; empty when ok is False
    reference_blob_indices: list[int]  # letter-derived, parallel to `lines`
    width: int  # longest row
    height: int  # number of rows

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "errors": [e.to_dict() for e in self.errors],
            "lines": [ln.to_dict() for ln in self.lines],
            "reference_blob_indices": list(self.reference_blob_indices),
            "width": self.width,
            "height": self.height,
        }
