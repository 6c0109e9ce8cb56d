from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from blob_contracts.geometry import Line
from letter_image.contracts import BACKGROUND
from letter_image.module import index_to_letter, letter_to_index

from .base import BlobRenderEngine


class AsciiTextEngine(BlobRenderEngine):
    def backend_id(self) -> str:
        return "ascii_text"

    def max_blob_index(self) -> int | None:
        return letter_to_index("Z")

    def render(
        self,
        *,
        lines: Sequence[Line],
        blob_indices: Sequence[int],
        width: int,
        height: int,
        out_file: Path | None,
    ) -> tuple[list[str] | None, dict[str, Any]]:
        canvas = [[BACKGROUND] * width for _ in range(height)]
        for line, b in zip(lines, blob_indices):
            letter = index_to_letter(b)
            row = canvas[line.y]
            for x in range(line.x, line.x_end):
                row[x] = letter

        rows = ["".join(r) for r in canvas]

        if out_file is not None:
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text("\n".join(rows) + "\n", encoding="utf-8")

        return rows, {"backend": self.backend_id(), "backend_version": self.backend_version()}
