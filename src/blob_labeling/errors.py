from __future__ import annotations


class UnsortedLinesError(ValueError):
    """Input lines are not in row-major (y, x) order."""

    def __init__(self, index: int, previous: tuple[int, int], current: tuple[int, int]) -> None:
        super().__init__(
            f"Lines must be sorted by (y, x): line {index} at {current} follows line {index - 1} at {previous}"
        )
        self.index = index
        self.previous = previous
        self.current = current


class BlobInvariantError(RuntimeError):
    """
    Internal labeling invariant violated (e.g. a processed line is owned by no group).

    This is a defect, never an input problem; callers should let it propagate.
    """
