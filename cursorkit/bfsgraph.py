"""Undirected/directed graph with breadth-first search and shortest paths."""

from __future__ import annotations

from bisect import insort_left
from collections import deque

INF = -1
"""Distance of a vertex not reachable from the source."""

NIL = -2
"""Undefined vertex label."""


class GraphError(Exception):
    """Raised when a Graph operation's precondition does not hold."""


class Graph:
    """A graph on vertices 1..order with sorted adjacency lists and BFS data."""

    def __init__(self, order: int) -> None:
        if order < 0:
            raise GraphError("cannot create a Graph with a negative order")
        self._order = order
        self._size = 0
        self._adj: list[list[int]] = [[] for _ in range(order + 1)]
        self._parent = [NIL] * (order + 1)
        self._distance = [INF] * (order + 1)
        self._source = NIL

    def __str__(self) -> str:
        return "".join(
            f"{u}: " + "".join(f"{v} " for v in self._adj[u]) + "\n"
            for u in range(1, self._order + 1)
        )

    def _check(self, u: int, operation: str, what: str = "vertex") -> None:
        if not 1 <= u <= self._order:
            raise GraphError(f"calling {operation}() on an invalid {what}")

    # Access -----------------------------------------------------------------

    def order(self) -> int:
        """Return the number of vertices."""
        return self._order

    def size(self) -> int:
        """Return the number of edges."""
        return self._size

    def source(self) -> int:
        """Return the source of the most recent BFS, or NIL."""
        return self._source

    def parent(self, u: int) -> int:
        """Return u's parent in the BFS tree, or NIL."""
        self._check(u, "getParent")
        return self._parent[u]

    def distance(self, u: int) -> int:
        """Return the distance from the BFS source to u, or INF."""
        self._check(u, "getDist")
        return self._distance[u]

    def path(self, u: int) -> list[int]:
        """Return a shortest path from the BFS source to u, or [NIL] if none exists."""
        self._check(u, "getPath")
        if self._source == NIL:
            raise GraphError("calling getPath() before calling BFS()")
        reversed_path = []
        v = u
        while v != self._source:
            if self._parent[v] == NIL:
                return [NIL]
            reversed_path.append(v)
            v = self._parent[v]
        reversed_path.append(self._source)
        return reversed_path[::-1]

    def neighbors(self, u: int) -> tuple[int, ...]:
        """Return u's adjacency list in increasing order."""
        self._check(u, "neighbors")
        return tuple(self._adj[u])

    # Manipulation -----------------------------------------------------------

    def make_null(self) -> None:
        """Remove every edge."""
        self._size = 0
        for adj in self._adj:
            adj.clear()

    def add_edge(self, u: int, v: int) -> None:
        """Join u and v with an undirected edge."""
        self._check(u, "addEdge")
        self._check(v, "addEdge")
        self.add_arc(u, v)
        self.add_arc(v, u)
        self._size -= 1

    def add_arc(self, u: int, v: int) -> None:
        """Add a directed edge from u to v."""
        self._check(u, "addArc")
        self._check(v, "addArc")
        insort_left(self._adj[u], v)
        self._size += 1

    def bfs(self, s: int) -> None:
        """Run breadth-first search from s, recording parents and distances."""
        self._check(s, "BFS", "source vertex")
        self._source = s
        self._parent = [NIL] * (self._order + 1)
        self._distance = [INF] * (self._order + 1)
        self._distance[s] = 0
        seen = {s}
        queue = deque([s])
        while queue:
            x = queue.popleft()
            for y in self._adj[x]:
                if y not in seen:
                    seen.add(y)
                    self._distance[y] = self._distance[x] + 1
                    self._parent[y] = x
                    queue.append(y)