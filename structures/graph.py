"""
graph.py — Undirected Graph Engine
===================================
Single source of truth for the graph.  The traced operations and the
snapshot accessor both talk to this object.

Responsibilities:
  1. CRUD on vertices & edges          (add / remove, idempotent)
  2. Adjacency queries                 (neighbours, has_edge, degree)
  3. DFS / BFS visit order             (deterministic: neighbour-list order)
  4. Snapshot                          (get_vertices / get_edges / to_dict)

Design decisions:
  - Vertices are plain string ids.  `_adj[vertex] → [neighbour, …]` keeps
    insertion order so traversal order is reproducible.
  - The relation is kept symmetric on every write: an edge is added to
    (or removed from) both neighbour lists in the same call.
  - No self-loops and no parallel edges.  Re-adding an edge reports
    Reason.DUPLICATE and changes nothing.
  - DFS uses an explicit stack of neighbour iterators, which reproduces
    the recursive visit order exactly.
"""

from collections import deque
from typing import Dict, Iterator, List, Set, Tuple

from structures.results import OpResult, Reason


class Graph:
    """
    Attributes:
        _adj : {vertex_id: [neighbour_id, …]} in insertion order.
    """

    def __init__(self):
        self._adj: Dict[str, List[str]] = {}

    # ==================================================================
    # VERTEX CRUD
    # ==================================================================
    def add_vertex(self, vertex: str) -> OpResult:
        if vertex in self._adj:
            return OpResult.fail(Reason.DUPLICATE)
        self._adj[vertex] = []
        return OpResult.ok()

    def remove_vertex(self, vertex: str) -> OpResult:
        if vertex not in self._adj:
            return OpResult.fail(Reason.NOT_FOUND)
        # drop every incident edge first so no neighbour list keeps a dangling id
        for nbr in list(self._adj[vertex]):
            self.remove_edge(vertex, nbr)
        del self._adj[vertex]
        return OpResult.ok()

    def has_vertex(self, vertex: str) -> bool:
        return vertex in self._adj

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, a: str, b: str) -> OpResult:
        if a == b:
            return OpResult.fail(Reason.SELF_LOOP)
        self._adj.setdefault(a, [])
        self._adj.setdefault(b, [])
        if b in self._adj[a]:
            return OpResult.fail(Reason.DUPLICATE)
        self._adj[a].append(b)
        self._adj[b].append(a)
        return OpResult.ok()

    def remove_edge(self, a: str, b: str) -> OpResult:
        if not self.has_edge(a, b):
            return OpResult.fail(Reason.NOT_FOUND)
        self._adj[a].remove(b)
        self._adj[b].remove(a)
        return OpResult.ok()

    def has_edge(self, a: str, b: str) -> bool:
        return a in self._adj and b in self._adj[a]

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, vertex: str) -> List[str]:
        return list(self._adj.get(vertex, []))

    def degree(self, vertex: str) -> int:
        return len(self._adj.get(vertex, []))

    # ==================================================================
    # TRAVERSALS
    # ==================================================================
    def depth_first(self, start: str) -> List[str]:
        """Recursive-order DFS.  Unknown start → []."""
        if start not in self._adj:
            return []
        result: List[str] = [start]
        visited: Set[str] = {start}
        stack: List[Iterator[str]] = [iter(self._adj[start])]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    result.append(nbr)
                    stack.append(iter(self._adj[nbr]))
                    break
            else:
                stack.pop()
        return result

    def breadth_first(self, start: str) -> List[str]:
        """Level-order BFS, marking at enqueue time.  Unknown start → []."""
        if start not in self._adj:
            return []
        result: List[str] = []
        visited: Set[str] = {start}
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            result.append(vertex)
            for nbr in self._adj[vertex]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return result

    # ==================================================================
    # SNAPSHOT
    # ==================================================================
    def get_vertices(self) -> List[str]:
        return list(self._adj.keys())

    def get_edges(self) -> List[Tuple[str, str]]:
        """Each undirected edge exactly once, keyed on its sorted pair."""
        seen: Set[Tuple[str, str]] = set()
        edges: List[Tuple[str, str]] = []
        for vertex, nbrs in self._adj.items():
            for nbr in nbrs:
                key = tuple(sorted((vertex, nbr)))
                if key in seen:
                    continue
                seen.add(key)
                edges.append((vertex, nbr))
        return edges

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj.values()) // 2

    def clear(self) -> None:
        self._adj.clear()

    def to_dict(self) -> dict:
        return {
            "vertices":  self.get_vertices(),
            "edges":     [list(e) for e in self.get_edges()],
            "adjacency": {v: list(nbrs) for v, nbrs in self._adj.items()},
        }

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
