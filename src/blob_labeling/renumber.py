from __future__ import annotations

from typing import Hashable, Sequence

from .errors import BlobInvariantError


def canonical_blob_indices(owners: Sequence[Hashable]) -> list[int]:
    """
    Map per-line group keys to contiguous blob indices.

    `owners[i]` is any key identifying the group of line i (a union-find root,
    a list position, ...). Ids are handed out in order of first appearance, so
    blob k is the group whose smallest line index is the k-th smallest. The
    result depends only on the partition, never on how keys were chosen.
    """
    ids: dict[Hashable, int] = {}
    out: list[int] = []
    for key in owners:
        idx = ids.get(key)
        if idx is None:
            idx = len(ids)
            ids[key] = idx
        out.append(idx)
    return out


def owners_from_groups(n: int, groups: Sequence[Sequence[int]]) -> list[int]:
    """Turn an explicit partition of 0..n-1 into per-line owner keys (group positions)."""
    owners: list[int | None] = [None] * n
    for pos, members in enumerate(groups):
        for i in members:
            if not (0 <= i < n):
                raise BlobInvariantError(f"group {pos} holds out-of-range line {i} (n={n})")
            if owners[i] is not None:
                raise BlobInvariantError(f"line {i} is held by groups {owners[i]} and {pos}")
            owners[i] = pos

    missing = [i for i, o in enumerate(owners) if o is None]
    if missing:
        raise BlobInvariantError(f"lines not held by any group: {missing[:10]}")
    return [o for o in owners if o is not None]
