"""
operations/__init__.py — Operation Registry
============================================
Single source of truth for every traced operation the visualizer knows
about.

    from operations import REGISTRY, get_operation

REGISTRY is a nested dict:
    {
        "bst": {
            "insert": OperationInfo(structure, name, label, fn, params, pseudocode, …),
            …
        },
        …
    }

OperationInfo is a lightweight dataclass.  The session and the HTTP layer
both consume it, so adding an operation is: write the generator, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from operations import bst_ops, graph_ops, hash_table_ops, linear_ops, linked_list_ops
from operations import params as p

STRUCTURES: List[str] = ["linked_list", "stack", "queue", "bst", "hash_table", "graph"]


# ---------------------------------------------------------------------------
# OperationInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OperationInfo:
    structure:       str                               # registry group, e.g. "bst"
    name:            str                               # operation key, e.g. "insert"
    label:           str                               # human label, e.g. "Insert"
    fn:              Callable                          # the generator function
    pseudocode:      List[str]                         # lines for the side-panel
    params:          Dict[str, Callable[[Any], Any]] = field(default_factory=dict)  # name → converter
    defaults:        Dict[str, Any] = field(default_factory=dict)
    mutates:         bool = True                       # can change the structure?
    complexity_time: str  = ""                         # e.g. "O(h)"
    description:     str  = ""                         # one-liner for the UI card

    @property
    def key(self) -> str:
        return f"{self.structure}.{self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":             self.key,
            "structure":       self.structure,
            "name":            self.name,
            "label":           self.label,
            "params":          list(self.params),
            "defaults":        dict(self.defaults),
            "mutates":         self.mutates,
            "complexity_time": self.complexity_time,
            "description":     self.description,
            "pseudocode":      list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_ENTRIES: List[OperationInfo] = [

    # -- linked list --
    OperationInfo(
        structure="linked_list", name="insert_head", label="Insert at Head",
        fn=linked_list_ops.insert_head, pseudocode=linked_list_ops.INSERT_HEAD_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(1)",
        description="New node points at the old head and becomes the head.",
    ),
    OperationInfo(
        structure="linked_list", name="insert_tail", label="Insert at Tail",
        fn=linked_list_ops.insert_tail, pseudocode=linked_list_ops.INSERT_TAIL_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(n)",
        description="Walk to the last node, then link the new node after it.",
    ),
    OperationInfo(
        structure="linked_list", name="insert_at", label="Insert at Position",
        fn=linked_list_ops.insert_at, pseudocode=linked_list_ops.INSERT_AT_PSEUDOCODE,
        params={"value": p.number, "position": p.integer}, complexity_time="O(n)",
        description="Position is clamped to [0, length]; past the end means tail insert.",
    ),
    OperationInfo(
        structure="linked_list", name="delete", label="Delete Value",
        fn=linked_list_ops.delete, pseudocode=linked_list_ops.DELETE_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(n)",
        description="Unlink the first node holding the value.",
    ),
    OperationInfo(
        structure="linked_list", name="search", label="Search",
        fn=linked_list_ops.search, pseudocode=linked_list_ops.SEARCH_PSEUDOCODE,
        params={"value": p.number}, mutates=False, complexity_time="O(n)",
        description="Walk from the head; returns the position or -1.",
    ),

    # -- stack --
    OperationInfo(
        structure="stack", name="push", label="Push",
        fn=linear_ops.push, pseudocode=linear_ops.PUSH_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(1)",
        description="Add a value on top.",
    ),
    OperationInfo(
        structure="stack", name="pop", label="Pop",
        fn=linear_ops.pop, pseudocode=linear_ops.POP_PSEUDOCODE,
        complexity_time="O(1)",
        description="Remove and return the top value (last in, first out).",
    ),
    OperationInfo(
        structure="stack", name="peek", label="Peek",
        fn=linear_ops.stack_peek, pseudocode=linear_ops.STACK_PEEK_PSEUDOCODE,
        mutates=False, complexity_time="O(1)",
        description="Read the top value without removing it.",
    ),

    # -- queue --
    OperationInfo(
        structure="queue", name="enqueue", label="Enqueue",
        fn=linear_ops.enqueue, pseudocode=linear_ops.ENQUEUE_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(1)",
        description="Add a value at the rear.",
    ),
    OperationInfo(
        structure="queue", name="dequeue", label="Dequeue",
        fn=linear_ops.dequeue, pseudocode=linear_ops.DEQUEUE_PSEUDOCODE,
        complexity_time="O(1)",
        description="Remove and return the front value (first in, first out).",
    ),
    OperationInfo(
        structure="queue", name="peek", label="Peek",
        fn=linear_ops.queue_peek, pseudocode=linear_ops.QUEUE_PEEK_PSEUDOCODE,
        mutates=False, complexity_time="O(1)",
        description="Read the front value without removing it.",
    ),

    # -- binary search tree --
    OperationInfo(
        structure="bst", name="insert", label="Insert",
        fn=bst_ops.insert, pseudocode=bst_ops.INSERT_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(h)",
        description="Descend by comparison and attach in the first empty slot.",
    ),
    OperationInfo(
        structure="bst", name="delete", label="Delete",
        fn=bst_ops.delete, pseudocode=bst_ops.DELETE_PSEUDOCODE,
        params={"value": p.number}, complexity_time="O(h)",
        description="Leaf, one-child and two-child (in-order successor) cases.",
    ),
    OperationInfo(
        structure="bst", name="search", label="Search",
        fn=bst_ops.search, pseudocode=bst_ops.SEARCH_PSEUDOCODE,
        params={"value": p.number}, mutates=False, complexity_time="O(h)",
        description="Binary descent from the root.",
    ),
    OperationInfo(
        structure="bst", name="traverse", label="Traverse",
        fn=bst_ops.traverse, pseudocode=bst_ops.TRAVERSE_PSEUDOCODE,
        params={"order": p.choice("inorder", "preorder", "postorder")},
        defaults={"order": "inorder"}, mutates=False, complexity_time="O(n)",
        description="In-order output of a BST is always sorted.",
    ),

    # -- hash table --
    OperationInfo(
        structure="hash_table", name="insert", label="Insert",
        fn=hash_table_ops.insert, pseudocode=hash_table_ops.INSERT_PSEUDOCODE,
        params={"key": p.key, "value": p.payload}, defaults={"value": ""},
        complexity_time="O(1) avg, O(k) chain",
        description="Hash, locate the bucket, update or append to its chain.",
    ),
    OperationInfo(
        structure="hash_table", name="get", label="Search",
        fn=hash_table_ops.get, pseudocode=hash_table_ops.GET_PSEUDOCODE,
        params={"key": p.key}, mutates=False,
        complexity_time="O(1) avg, O(k) chain",
        description="Hash, locate the bucket, scan its chain for the key.",
    ),
    OperationInfo(
        structure="hash_table", name="delete", label="Delete",
        fn=hash_table_ops.delete, pseudocode=hash_table_ops.DELETE_PSEUDOCODE,
        params={"key": p.key}, complexity_time="O(1) avg, O(k) chain",
        description="Hash, locate the bucket, remove the key from its chain.",
    ),

    # -- graph --
    OperationInfo(
        structure="graph", name="add_vertex", label="Add Vertex",
        fn=graph_ops.add_vertex, pseudocode=graph_ops.ADD_VERTEX_PSEUDOCODE,
        params={"vertex": p.vertex}, complexity_time="O(1)",
        description="Idempotent: adding an existing vertex changes nothing.",
    ),
    OperationInfo(
        structure="graph", name="add_edge", label="Add Edge",
        fn=graph_ops.add_edge, pseudocode=graph_ops.ADD_EDGE_PSEUDOCODE,
        params={"a": p.vertex, "b": p.vertex}, complexity_time="O(deg)",
        description="Undirected; missing vertices are created, repeats are ignored.",
    ),
    OperationInfo(
        structure="graph", name="remove_vertex", label="Remove Vertex",
        fn=graph_ops.remove_vertex, pseudocode=graph_ops.REMOVE_VERTEX_PSEUDOCODE,
        params={"vertex": p.vertex}, complexity_time="O(deg²)",
        description="Drops every incident edge, then the vertex.",
    ),
    OperationInfo(
        structure="graph", name="remove_edge", label="Remove Edge",
        fn=graph_ops.remove_edge, pseudocode=graph_ops.REMOVE_EDGE_PSEUDOCODE,
        params={"a": p.vertex, "b": p.vertex}, complexity_time="O(deg)",
        description="Removes each endpoint from the other's neighbour list.",
    ),
    OperationInfo(
        structure="graph", name="traverse", label="Traverse",
        fn=graph_ops.traverse, pseudocode=graph_ops.TRAVERSE_PSEUDOCODE,
        params={"start": p.vertex, "mode": p.choice("dfs", "bfs")},
        defaults={"mode": "dfs"}, mutates=False, complexity_time="O(V + E)",
        description="DFS dives deep first; BFS explores layer by layer.",
    ),
]

REGISTRY: Dict[str, Dict[str, OperationInfo]] = {name: {} for name in STRUCTURES}
for _info in _ENTRIES:
    REGISTRY[_info.structure][_info.name] = _info


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(structure: str, name: str) -> Optional[OperationInfo]:
    """Return OperationInfo by structure + name, or None."""
    return REGISTRY.get(structure, {}).get(name)


def list_operations(structure: Optional[str] = None) -> List[OperationInfo]:
    """All operations (or one structure's) in registration order."""
    if structure is None:
        return list(_ENTRIES)
    return list(REGISTRY.get(structure, {}).values())


__all__ = [
    "OperationInfo",
    "REGISTRY",
    "STRUCTURES",
    "get_operation",
    "list_operations",
]
