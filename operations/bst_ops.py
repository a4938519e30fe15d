"""
bst_ops.py — Binary Search Tree Operations
===========================================
Insert, delete and search all start the same way: walk the nodes that
`find_path` reports, one VISIT per node, with the comparison that sent
the descent left or right.  The structural change (if any) is applied
once, after the walk, by the engine itself.

Yields a Step at:
  1. Capacity check failure         →  REJECT (tree untouched, no walk)
  2. Each node on the descent path  →  VISIT
  3. Match / empty slot             →  FOUND / NOT_FOUND / REJECT
  4. In-order successor (delete)    →  SUCCESSOR
  5. The mutation                   →  INSERT / REMOVE
"""

from typing import Generator, List, Union

from structures import BinarySearchTree, OpResult, Reason, TreeNode
from operations.step import Step, StepBuilder, StepKind

Number = Union[int, float]

TRAVERSAL_LABELS = {
    "inorder":   "In-order traversal (left, node, right)",
    "preorder":  "Pre-order traversal (node, left, right)",
    "postorder": "Post-order traversal (left, right, node)",
}


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
INSERT_PSEUDOCODE: List[str] = [
    "def insert(value):",                           # 0
    "    if node_count >= MAX_NODES: reject",       # 1
    "    node ← root",                              # 2
    "    while node is not null:",                  # 3
    "        if value == node.value: reject",       # 4
    "        node ← value < node.value ? left : right", # 5
    "    attach new Node(value) in the empty slot", # 6
    "    node_count ← node_count + 1",              # 7
]

SEARCH_PSEUDOCODE: List[str] = [
    "def search(value):",                           # 0
    "    node ← root",                              # 1
    "    while node is not null:",                  # 2
    "        if value == node.value: return node",  # 3
    "        node ← value < node.value ? left : right", # 4
    "    return NONE",                              # 5
]

DELETE_PSEUDOCODE: List[str] = [
    "def delete(value):",                           # 0
    "    node ← search(value)",                     # 1
    "    if node is null: return NOT FOUND",        # 2
    "    if node is a leaf: detach node",           # 3
    "    elif node has one child: splice child up", # 4
    "    else:",                                    # 5
    "        succ ← min(node.right)",               # 6
    "        node.value ← succ.value",              # 7
    "        delete succ from right subtree",       # 8
    "    node_count ← node_count - 1",              # 9
]

TRAVERSE_PSEUDOCODE: List[str] = [
    "def traverse(node, order):",                   # 0
    "    if node is null: return",                  # 1
    "    pre:  emit(node); go(left); go(right)",    # 2
    "    in:   go(left); emit(node); go(right)",    # 3
    "    post: go(left); go(right); emit(node)",    # 4
]


# ---------------------------------------------------------------------------
# Shared descent
# ---------------------------------------------------------------------------
def _walk(sb: StepBuilder, path: List[TreeNode], value: Number, line: int) -> Generator[Step, None, None]:
    sb.overlay["path"] = []
    for depth, node in enumerate(path):
        sb.overlay["path"].append(node.value)
        if value == node.value:
            note = f"{value} == {node.value}."
        elif value < node.value:
            note = f"{value} < {node.value}: go left."
        else:
            note = f"{value} > {node.value}: go right."
        yield sb.step(StepKind.VISIT, subject=node.value, locator=depth, line=line, note=note)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def insert(tree: BinarySearchTree, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()

    if tree.node_count >= tree.max_nodes:
        yield sb.step(StepKind.REJECT, subject=value, line=1,
                      note=f"The tree already holds {tree.max_nodes} nodes: {value} is not inserted.")
        return tree.insert(value)

    yield sb.step(StepKind.START, subject=value, line=2,
                  note=f"Insert {value}: start at the root and compare on the way down.")

    path = tree.find_path(value)
    yield from _walk(sb, path, value, line=5)

    result = tree.insert(value)
    if result.reason is Reason.DUPLICATE:
        yield sb.step(StepKind.REJECT, subject=value, locator=len(path) - 1, line=4,
                      note=f"{value} is already in the tree. Duplicates are not stored.")
    elif not path:
        yield sb.step(StepKind.INSERT, subject=value, locator=0, line=6,
                      note=f"The tree was empty: {value} becomes the root.")
    else:
        parent = path[-1].value
        side = "left" if value < parent else "right"
        yield sb.step(StepKind.INSERT, subject=value, locator=len(path), line=6,
                      note=f"Empty {side} slot under {parent}: attach {value} there.")
    return result


def search(tree: BinarySearchTree, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    yield sb.step(StepKind.START, subject=value, line=1,
                  note=f"Search for {value}, starting at the root.")

    path = tree.find_path(value)
    yield from _walk(sb, path, value, line=4)

    if tree.search(value) is not None:
        yield sb.step(StepKind.FOUND, subject=value, locator=len(path) - 1, line=3,
                      note=f"Found {value} after visiting {len(path)} node(s).")
        return OpResult.ok(index=len(path) - 1, value=value)

    yield sb.step(StepKind.NOT_FOUND, subject=value, line=5,
                  note=f"Reached an empty slot: {value} is not in the tree.")
    return OpResult.fail(Reason.NOT_FOUND)


def delete(tree: BinarySearchTree, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    yield sb.step(StepKind.START, subject=value, line=1,
                  note=f"Delete {value}: first find it.")

    path = tree.find_path(value)
    yield from _walk(sb, path, value, line=1)

    if not path or path[-1].value != value:
        yield sb.step(StepKind.NOT_FOUND, subject=value, line=2,
                      note=f"{value} is not in the tree. Nothing to delete.")
        return tree.delete(value)

    node = path[-1]
    depth = len(path) - 1
    yield sb.step(StepKind.FOUND, subject=value, locator=depth, line=1,
                  note=f"Found {value} at depth {depth}.")

    if node.is_leaf:
        line, note = 3, f"{value} is a leaf: detach it."
    elif node.left is None or node.right is None:
        child = (node.left or node.right).value
        line, note = 4, f"{value} has one child ({child}): splice it into {value}'s place."
    else:
        successor = tree.min_node(node.right)
        yield sb.step(StepKind.SUCCESSOR, subject=successor.value, locator=depth, line=6,
                      note=f"{value} has two children. Its in-order successor is "
                           f"{successor.value}, the smallest value in the right subtree.")
        line, note = 8, (f"Copy {successor.value} into {value}'s node, then remove "
                         f"{successor.value}'s original node.")

    result = tree.delete(value)
    yield sb.step(StepKind.REMOVE, subject=value, locator=depth, line=line, note=note)
    return result


def traverse(tree: BinarySearchTree, order: str) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    values = tree.traverse(order)
    line = {"preorder": 2, "inorder": 3, "postorder": 4}[order]

    yield sb.step(StepKind.START, subject=order, line=0, note=TRAVERSAL_LABELS[order])

    sb.overlay["result"] = []
    for pos, value in enumerate(values):
        sb.overlay["result"].append(value)
        yield sb.step(StepKind.EMIT, subject=value, locator=pos, line=line,
                      note=f"Visit {value}.")
    return OpResult.ok(value=values)
