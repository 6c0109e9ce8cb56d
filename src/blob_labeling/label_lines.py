from __future__ import annotations

from typing import Any, Sequence

from blob_contracts.geometry import BBox, Line
from blob_contracts.labeling import BlobSummary, LabelingIssue, LabelingResult

from .config import LabelingConfig, LabelingStrategy
from .disjoint_set import DisjointSet
from .errors import UnsortedLinesError
from .group_list import partition_by_group_list
from .renumber import canonical_blob_indices, owners_from_groups
from .touching import lines_touch


def check_sorted(lines: Sequence[Line]) -> None:
    """Raise UnsortedLinesError at the first pair that breaks (y, x) order."""
    for i in range(1, len(lines)):
        prev_key = lines[i - 1].sort_key()
        cur_key = lines[i].sort_key()
        if cur_key < prev_key:
            raise UnsortedLinesError(i, prev_key, cur_key)


def partition_by_disjoint_set(lines: Sequence[Line]) -> tuple[DisjointSet, int]:
    """
    Near-linear pass over row-major sorted lines.

    Only the row directly above can hold a touching predecessor, and within
    that row candidates are visited left to right with a cursor that never
    moves backwards. Every line starts as its own singleton set; joining the
    first touching predecessor is an ordinary union, every later union with a
    different set is a bridge.

    Returns (disjoint set over line indices, number of bridge merges).
    """
    ds = DisjointSet(len(lines))
    bridges = 0

    row_start = 0
    prev_start = prev_end = 0  # [prev_start, prev_end) holds the row above
    cursor = 0

    for i, line in enumerate(lines):
        if i == 0 or line.y != lines[i - 1].y:
            if i > 0 and line.y == lines[i - 1].y + 1:
                prev_start, prev_end = row_start, i
            else:
                prev_start = prev_end = i
            row_start = i
            cursor = prev_start

        # Predecessors ending left of this line cannot touch it or anything after it on this row.
        while cursor < prev_end and lines[cursor].x_end <= line.x:
            cursor += 1

        joined = False
        j = cursor
        while j < prev_end and lines[j].x < line.x_end:
            if lines_touch(lines[j], line):
                if not joined:
                    ds.union(j, i)
                    joined = True
                elif not ds.connected(j, i):
                    ds.union(j, i)
                    bridges += 1
            j += 1

    return ds, bridges


def _label(lines: Sequence[Line], config: LabelingConfig) -> tuple[list[int], int]:
    if not lines:
        return [], 0
    if config.require_sorted:
        check_sorted(lines)

    n = len(lines)
    if config.strategy == LabelingStrategy.DISJOINT_SET:
        ds, bridges = partition_by_disjoint_set(lines)
        owners = [ds.find(i) for i in range(n)]
    elif config.strategy == LabelingStrategy.GROUP_LIST:
        groups, bridges = partition_by_group_list(lines)
        owners = owners_from_groups(n, groups)
    else:
        raise ValueError(f"Unsupported labeling strategy: {config.strategy}")

    return canonical_blob_indices(owners), bridges


class BlobLabeler:
    """
    Assigns a blob index to every line of a row-major sorted line sequence.

    Holds no state between calls besides its (immutable) config, so one
    instance can be reused and shared.
    """

    def __init__(self, config: LabelingConfig | None = None) -> None:
        self.config = config if config is not None else LabelingConfig()
        self.config.validate()

    def process(self, lines: Sequence[Line]) -> list[int]:
        """
        Return blob indices parallel to `lines`.

        Index 0 is the blob holding lines[0]; further indices follow the
        order in which blobs are first met in a row-major scan.
        """
        indices, _bridges = _label(lines, self.config)
        return indices


def summarize_blobs(lines: Sequence[Line], blob_indices: Sequence[int]) -> list[BlobSummary]:
    members: dict[int, list[int]] = {}
    for i, b in enumerate(blob_indices):
        members.setdefault(b, []).append(i)

    out: list[BlobSummary] = []
    for b in sorted(members):
        idxs = members[b]
        bbox: BBox = lines[idxs[0]].bbox()
        for i in idxs[1:]:
            bbox = bbox.union(lines[i].bbox())
        out.append(
            BlobSummary(
                blob_index=b,
                line_indices=idxs,
                bbox=bbox,
                pixel_count=sum(lines[i].length for i in idxs),
            )
        )
    return out


def label_lines(lines: Sequence[Line], config: LabelingConfig) -> LabelingResult:
    config.validate()

    errors: list[LabelingIssue] = []
    meta: dict[str, Any] = {
        "stage": "blob_labeling",
        "version": "blob_labeling_v1",
        "labeling_config": config.to_dict(),
        "counts": {},
    }

    blob_indices: list[int] = []
    bridges = 0
    try:
        blob_indices, bridges = _label(lines, config)
    except UnsortedLinesError as e:
        errors.append(
            LabelingIssue(
                code="LABEL_UNSORTED_INPUT",
                message=str(e),
                detail={"index": e.index, "previous": list(e.previous), "current": list(e.current)},
            )
        )

    blobs = summarize_blobs(lines, blob_indices) if not errors else []

    meta["counts"] = {
        "lines": len(lines),
        "rows": len({ln.y for ln in lines}),
        "blobs": len(blobs),
        "bridge_merges": bridges,
    }

    return LabelingResult(
        ok=len(errors) == 0,
        errors=errors,
        meta=meta,
        blob_indices=blob_indices,
        blobs=blobs,
    )
