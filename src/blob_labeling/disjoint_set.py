from __future__ import annotations


class DisjointSet:
    """
    Union-find over the integers 0..n-1 (line indices).

    Union by size, full path compression on `find`. Roots are arbitrary but
    stable between unions; callers needing ordered ids renumber afterwards.
    """

    __slots__ = ("_parent", "_size")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be >= 0")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        # compress
        while parent[x] != root:
            nxt = parent[x]
            parent[x] = root
            x = nxt
        return root

    def union(self, a: int, b: int) -> int:
        """Merge the sets holding a and b; return the surviving root."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return ra
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return ra

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
