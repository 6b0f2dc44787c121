"""Directed graph with depth-first search, discover/finish times and transposition."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator

UNDEF = -1
"""Discover or finish time of a vertex that depth-first search has not reached."""

NIL = 0
"""Undefined vertex label."""


class DigraphError(Exception):
    """Raised when a Digraph operation's precondition does not hold."""


class Digraph:
    """A directed graph on vertices 1..order with sorted adjacency lists and DFS data."""

    def __init__(self, order: int) -> None:
        if order < 0:
            raise DigraphError("cannot create a Graph with a negative order")
        self._order = order
        self._size = 0
        self._adj: list[list[int]] = [[] for _ in range(order + 1)]
        self._parent = [NIL] * (order + 1)
        self._discover = [UNDEF] * (order + 1)
        self._finish = [UNDEF] * (order + 1)

    def __str__(self) -> str:
        return "".join(
            f"{u}: " + "".join(f"{v} " for v in self._adj[u]) + "\n"
            for u in range(1, self._order + 1)
        )

    def __repr__(self) -> str:
        return f"Digraph(order={self._order}, size={self._size})"

    def _check(self, u: int, operation: str) -> None:
        if not 1 <= u <= self._order:
            raise DigraphError(f"calling {operation}() on an invalid vertex")

    # Access -----------------------------------------------------------------

    def order(self) -> int:
        """Return the number of vertices."""
        return self._order

    def size(self) -> int:
        """Return the number of arcs."""
        return self._size

    def parent(self, u: int) -> int:
        """Return u's parent in the DFS forest, or NIL."""
        self._check(u, "getParent")
        return self._parent[u]

    def discover(self, u: int) -> int:
        """Return u's discover time in the last DFS, or UNDEF."""
        self._check(u, "getDiscover")
        return self._discover[u]

    def finish(self, u: int) -> int:
        """Return u's finish time in the last DFS, or UNDEF."""
        self._check(u, "getFinish")
        return self._finish[u]

    def neighbors(self, u: int) -> tuple[int, ...]:
        """Return u's adjacency list in increasing order."""
        self._check(u, "neighbors")
        return tuple(self._adj[u])

    # Manipulation -----------------------------------------------------------

    def add_arc(self, u: int, v: int) -> None:
        """Add a directed arc from u to v; an arc already present is not added twice."""
        self._check(u, "addArc")
        self._check(v, "addArc")
        adj = self._adj[u]
        pos = bisect_left(adj, v)
        if pos < len(adj) and adj[pos] == v:
            return
        adj.insert(pos, v)
        self._size += 1

    def add_edge(self, u: int, v: int) -> None:
        """Join u and v in both directions, counted as a single edge."""
        self._check(u, "addEdge")
        self._check(v, "addEdge")
        self.add_arc(u, v)
        self.add_arc(v, u)
        self._size -= 1

    def dfs(self, order: Iterable[int]) -> list[int]:
        """Run depth-first search visiting roots in the given order.

        The order must hold as many vertices as the graph has. Returns the
        vertices sorted by decreasing finish time.
        """
        vertices = list(order)
        if len(vertices) != self._order:
            raise DigraphError("calling DFS() with incomplete stack")
        for v in vertices:
            self._check(v, "DFS")

        self._parent = [NIL] * (self._order + 1)
        reached: set[int] = set()
        finished: list[int] = []
        time = 0

        for root in vertices:
            if root in reached:
                continue
            time += 1
            reached.add(root)
            self._discover[root] = time
            stack: list[tuple[int, Iterator[int]]] = [(root, iter(self._adj[root]))]
            while stack:
                x, pending = stack[-1]
                for y in pending:
                    if y not in reached:
                        self._parent[y] = x
                        time += 1
                        reached.add(y)
                        self._discover[y] = time
                        stack.append((y, iter(self._adj[y])))
                        break
                else:
                    stack.pop()
                    time += 1
                    self._finish[x] = time
                    finished.append(x)

        finished.reverse()
        return finished

    # Other ------------------------------------------------------------------

    def transpose(self) -> Digraph:
        """Return a new graph with every arc reversed."""
        out = Digraph(self._order)
        for u in range(1, self._order + 1):
            for v in self._adj[u]:
                out._adj[v].append(u)
        out._size = self._size
        return out

    def copy(self) -> Digraph:
        """Return a new graph with the same arcs and no DFS data."""
        out = Digraph(self._order)
        out._adj = [list(adj) for adj in self._adj]
        out._size = self._size
        return out