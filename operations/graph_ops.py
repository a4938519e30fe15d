"""
graph_ops.py — Graph Operations
================================
Vertex / edge edits are one or two steps each.  Traversals replay the
visit order the engine reports (`depth_first` / `breadth_first`), one
VISIT per vertex, with the running visited list in the overlay.

A traversal from a vertex that does not exist yields a single
NOT_FOUND step and an empty result; it is not an error.
"""

from typing import Generator, List

from structures import Graph, OpResult, Reason
from operations.step import Step, StepBuilder, StepKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
ADD_VERTEX_PSEUDOCODE: List[str] = [
    "def add_vertex(v):",                       # 0
    "    if v not in adj: adj[v] ← []",         # 1
]

ADD_EDGE_PSEUDOCODE: List[str] = [
    "def add_edge(a, b):",                      # 0
    "    if a == b: reject self-loop",          # 1
    "    add_vertex(a); add_vertex(b)",         # 2
    "    if b in adj[a]: return",               # 3
    "    adj[a].append(b)",                     # 4
    "    adj[b].append(a)",                     # 5
]

REMOVE_VERTEX_PSEUDOCODE: List[str] = [
    "def remove_vertex(v):",                    # 0
    "    if v not in adj: return",              # 1
    "    for n in adj[v]: remove_edge(v, n)",   # 2
    "    delete adj[v]",                        # 3
]

REMOVE_EDGE_PSEUDOCODE: List[str] = [
    "def remove_edge(a, b):",                   # 0
    "    if b not in adj[a]: return",           # 1
    "    adj[a].remove(b)",                     # 2
    "    adj[b].remove(a)",                     # 3
]

DFS_PSEUDOCODE: List[str] = [
    "def DFS(start):",                          # 0
    "    visited ← {}",                         # 1
    "    def visit(v):",                        # 2
    "        visited.add(v); emit(v)",          # 3
    "        for n in adj[v]:",                 # 4
    "            if n not in visited: visit(n)", # 5
    "    visit(start)",                         # 6
]

BFS_PSEUDOCODE: List[str] = [
    "def BFS(start):",                          # 0
    "    queue ← [start]; visited ← {start}",   # 1
    "    while queue is not empty:",            # 2
    "        v ← queue.dequeue(); emit(v)",     # 3
    "        for n in adj[v]:",                 # 4
    "            if n not in visited:",         # 5
    "                visited.add(n)",           # 6
    "                queue.enqueue(n)",         # 7
]

TRAVERSE_PSEUDOCODE: List[str] = DFS_PSEUDOCODE + BFS_PSEUDOCODE


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def add_vertex(graph: Graph, vertex: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    result = graph.add_vertex(vertex)
    if result.success:
        yield sb.step(StepKind.INSERT, subject=vertex, line=1,
                      note=f"Add vertex '{vertex}' with no neighbours.")
    else:
        yield sb.step(StepKind.REJECT, subject=vertex, line=1,
                      note=f"Vertex '{vertex}' already exists.")
    return result


def add_edge(graph: Graph, a: str, b: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    if a == b:
        yield sb.step(StepKind.REJECT, subject=(a, b), line=1,
                      note=f"An edge from '{a}' to itself is not allowed.")
        return graph.add_edge(a, b)

    yield sb.step(StepKind.START, subject=(a, b), line=2,
                  note=f"Connect '{a}' and '{b}'.")

    for vertex in (a, b):
        if not graph.has_vertex(vertex):
            yield sb.step(StepKind.INSERT, subject=vertex, line=2,
                          note=f"Vertex '{vertex}' does not exist yet: create it.")

    result = graph.add_edge(a, b)
    if result.success:
        yield sb.step(StepKind.INSERT, subject=(a, b), line=5,
                      note=f"'{b}' is now a neighbour of '{a}', and '{a}' of '{b}'.")
    else:
        yield sb.step(StepKind.REJECT, subject=(a, b), line=3,
                      note=f"'{a}' and '{b}' are already connected.")
    return result


def remove_vertex(graph: Graph, vertex: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    if not graph.has_vertex(vertex):
        yield sb.step(StepKind.NOT_FOUND, subject=vertex, line=1,
                      note=f"Vertex '{vertex}' does not exist.")
        return graph.remove_vertex(vertex)

    for nbr in graph.neighbours(vertex):
        yield sb.step(StepKind.VISIT, subject=(vertex, nbr), line=2,
                      note=f"Drop the edge '{vertex}'-'{nbr}' from both neighbour lists.")

    result = graph.remove_vertex(vertex)
    yield sb.step(StepKind.REMOVE, subject=vertex, line=3,
                  note=f"Remove vertex '{vertex}'.")
    return result


def remove_edge(graph: Graph, a: str, b: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    result = graph.remove_edge(a, b)
    if result.success:
        yield sb.step(StepKind.REMOVE, subject=(a, b), line=3,
                      note=f"Disconnect '{a}' and '{b}'.")
    else:
        yield sb.step(StepKind.NOT_FOUND, subject=(a, b), line=1,
                      note=f"There is no edge between '{a}' and '{b}'.")
    return result


def traverse(graph: Graph, start: str, mode: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    label = "Depth-first" if mode == "dfs" else "Breadth-first"
    # BFS lines follow the DFS block in TRAVERSE_PSEUDOCODE
    offset = 0 if mode == "dfs" else len(DFS_PSEUDOCODE)

    if not graph.has_vertex(start):
        yield sb.step(StepKind.NOT_FOUND, subject=start, line=offset,
                      note=f"Vertex '{start}' does not exist: the traversal is empty.")
        return OpResult(success=False, reason=Reason.NOT_FOUND, value=[])

    order = graph.depth_first(start) if mode == "dfs" else graph.breadth_first(start)
    yield sb.step(StepKind.START, subject=start, line=offset + (6 if mode == "dfs" else 1),
                  note=f"{label} traversal starting from '{start}'.")

    sb.overlay["visited"] = []
    for pos, vertex in enumerate(order):
        sb.overlay["visited"].append(vertex)
        sb.overlay["neighbours"] = graph.neighbours(vertex)
        yield sb.step(StepKind.VISIT, subject=vertex, locator=pos, line=offset + 3,
                      note=f"Visit '{vertex}' ({pos + 1} of {len(order)}).")
    return OpResult.ok(value=order)
