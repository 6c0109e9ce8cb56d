from __future__ import annotations

from pathlib import Path
from typing import Sequence

from blob_contracts.geometry import Line

from .contracts import BACKGROUND, FIRST_LETTER, LAST_LETTER, DecodeError, DecodeResult


def letter_to_index(letter: str) -> int:
    return ord(letter) - ord(FIRST_LETTER)


def index_to_letter(index: int) -> str:
    if not (0 <= index <= letter_to_index(LAST_LETTER)):
        raise ValueError(f"blob index {index} has no letter (0..25)")
    return chr(ord(FIRST_LETTER) + index)


def _failed(rows: Sequence[str], error: DecodeError) -> DecodeResult:
    # No partial data: callers must not label or render a half-decoded image.
    return DecodeResult(
        ok=False,
        errors=[error],
        lines=[],
        reference_blob_indices=[],
        width=max((len(r) for r in rows), default=0),
        height=len(rows),
    )


def decode_letter_rows(rows: Sequence[str]) -> DecodeResult:
    """
    Decode a letter-encoded raster into lines plus the reference labeling.

    '.' is background; 'A'..'Z' mark line pixels and double as the expected
    blob index ('A' -> 0). A run ends at '.' or at the row end; two different
    letters side by side on a row are rejected since a line may not change
    blob mid-run.
    """
    lines: list[Line] = []
    reference: list[int] = []

    for y, row in enumerate(rows):
        previous = BACKGROUND
        run_x = 0
        for x, pixel in enumerate(row):
            if pixel != BACKGROUND and not (FIRST_LETTER <= pixel <= LAST_LETTER):
                return _failed(
                    rows,
                    DecodeError(
                        code="DECODE_ILLEGAL_CHARACTER",
                        message="Letter images may only contain '.' and 'A'-'Z'.",
                        detail={"row": y, "column": x, "char": pixel},
                    ),
                )
            if pixel != BACKGROUND and previous != BACKGROUND and pixel != previous:
                return _failed(
                    rows,
                    DecodeError(
                        code="DECODE_TOUCHING_RUNS",
                        message=f"Differently lettered runs touch on row {y}.",
                        detail={"row": y, "column": x, "left": previous, "right": pixel},
                    ),
                )

            if pixel != BACKGROUND and previous == BACKGROUND:
                run_x = x
            elif pixel == BACKGROUND and previous != BACKGROUND:
                lines.append(Line(x=run_x, y=y, length=x - run_x))
                reference.append(letter_to_index(previous))
            previous = pixel

        if previous != BACKGROUND:
            lines.append(Line(x=run_x, y=y, length=len(row) - run_x))
            reference.append(letter_to_index(previous))

    return DecodeResult(
        ok=True,
        errors=[],
        lines=lines,
        reference_blob_indices=reference,
        width=max((len(r) for r in rows), default=0),
        height=len(rows),
    )


def read_letter_rows(path: Path) -> list[str]:
    rows = path.read_text(encoding="utf-8").splitlines()
    while rows and rows[-1].strip() == "":
        rows.pop()
    return rows


def decode_letter_file(path: Path) -> DecodeResult:
    return decode_letter_rows(read_letter_rows(path))
