from __future__ import annotations

from typing import Sequence

from blob_contracts.geometry import Line

from .errors import BlobInvariantError
from .touching import lines_touch


def _group_position(groups: list[list[int]], line_index: int) -> int:
    for pos, members in enumerate(groups):
        if line_index in members:
            return pos
    raise BlobInvariantError(f"processed line {line_index} is not held by any group")


def partition_by_group_list(lines: Sequence[Line]) -> tuple[list[list[int]], int]:
    """
    Quadratic baseline: keep an ordered list of groups (lists of line indices).

    Each line is compared with every earlier line. The first touching
    predecessor decides the group it joins; any further touching predecessor
    in another group bridges the two, and the later-created group is folded
    into the earlier one and dropped from the list.

    Returns (groups in creation order, number of bridge merges).
    """
    groups: list[list[int]] = []
    bridges = 0

    for i, line in enumerate(lines):
        home: int | None = None
        for j in range(i):
            if not lines_touch(lines[j], line):
                continue
            pos = _group_position(groups, j)
            if home is None:
                groups[pos].append(i)
                home = pos
                continue
            if pos == home:
                continue
            keep, absorb = (home, pos) if home < pos else (pos, home)
            groups[keep].extend(groups[absorb])
            del groups[absorb]
            home = keep
            bridges += 1

        if home is None:
            groups.append([i])

    return groups, bridges
