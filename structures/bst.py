"""
bst.py — Binary Search Tree Engine
===================================
Unbalanced BST of unique numbers with a hard capacity.

Responsibilities:
  1. insert / delete / search                       (OpResult, never raises)
  2. find_path: the exact nodes a descent visits   (drives every animation)
  3. in / pre / post-order traversal                (explicit stack)
  4. Layout-independent snapshot                    (parent/child + subtree sizes)

Design decisions:
  - No parent pointers.  Every TreeNode is owned by exactly one slot
    (`root`, or a parent's `left` / `right`) so unlinking is unambiguous.
  - `max_nodes` is a constructor argument; the capacity check happens
    before anything else so a full tree is never touched.
  - Traversals use an explicit stack.  Visit order is identical to the
    textbook recursive versions, without depending on the recursion limit.
  - The tree is intentionally NOT balanced.  Inserting sorted input
    produces a linked-list-shaped tree, which is part of the lesson.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from structures.results import OpResult, Reason

Number = Union[int, float]

DEFAULT_MAX_NODES = 15


class TreeNode:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Number):
        self.value: Number               = value
        self.left:  Optional["TreeNode"] = None
        self.right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"TreeNode({self.value})"


class BinarySearchTree:
    """
    Attributes:
        root       : Root TreeNode or None.
        node_count : Number of reachable nodes.
        max_nodes  : Capacity; inserts fail with Reason.CAPACITY once reached.
    """

    def __init__(self, max_nodes: int = DEFAULT_MAX_NODES):
        if max_nodes < 1:
            raise ValueError(f"max_nodes must be at least 1, got {max_nodes}")
        self.root:       Optional[TreeNode] = None
        self.node_count: int                = 0
        self.max_nodes:  int                = max_nodes

    # ==================================================================
    # MUTATION
    # ==================================================================
    def insert(self, value: Number) -> OpResult:
        if self.node_count >= self.max_nodes:
            return OpResult.fail(Reason.CAPACITY)

        if self.root is None:
            self.root = TreeNode(value)
            self.node_count += 1
            return OpResult.ok(value=value)

        current = self.root
        while True:
            if value == current.value:
                return OpResult.fail(Reason.DUPLICATE)
            if value < current.value:
                if current.left is None:
                    current.left = TreeNode(value)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(value)
                    break
                current = current.right

        self.node_count += 1
        return OpResult.ok(value=value)

    def delete(self, value: Number) -> OpResult:
        """
        Remove `value`.

        Two-child case: the node keeps its place and takes the value of its
        in-order successor (minimum of the right subtree); the successor's
        original node, which never has a left child, is then spliced out.
        """
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return OpResult.fail(Reason.NOT_FOUND)

        if node.left is not None and node.right is not None:
            succ_parent = node
            successor = node.right
            while successor.left is not None:
                succ_parent = successor
                successor = successor.left
            node.value = successor.value
            # successor has no left child: a leaf or single-child splice
            parent, node = succ_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.left = node.right = None

        self.node_count -= 1
        return OpResult.ok(value=value)

    def clear(self) -> None:
        self.root = None
        self.node_count = 0

    # ==================================================================
    # QUERIES
    # ==================================================================
    def search(self, value: Number) -> Optional[TreeNode]:
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.left if value < node.value else node.right
        return None

    def find_path(self, value: Number) -> List[TreeNode]:
        """
        Every node visited while descending towards `value`.

        Ends on the matching node, or on the last node before an empty
        child slot (which is exactly where an insert would attach).
        """
        path: List[TreeNode] = []
        node = self.root
        while node is not None:
            path.append(node)
            if value == node.value:
                break
            node = node.left if value < node.value else node.right
        return path

    def min_node(self, start: Optional[TreeNode] = None) -> Optional[TreeNode]:
        """Leftmost node under `start` (defaults to the root)."""
        node = start if start is not None else self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def height(self) -> int:
        """Number of levels; an empty tree has height 0."""
        best = 0
        stack: List[Tuple[TreeNode, int]] = [(self.root, 1)] if self.root else []
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))
        return best

    def __contains__(self, value: Number) -> bool:
        return self.search(value) is not None

    def __len__(self) -> int:
        return self.node_count

    # ==================================================================
    # TRAVERSALS
    # ==================================================================
    def in_order(self) -> List[Number]:
        """Left, node, right."""
        result: List[Number] = []
        stack: List[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[Number]:
        """Node, left, right."""
        return [node.value for node in self.nodes()]

    def post_order(self) -> List[Number]:
        """Left, right, node."""
        # reversed (node, right, left) pre-order is a post-order
        result: List[Number] = []
        stack: List[TreeNode] = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def traverse(self, order: str) -> List[Number]:
        orders = {
            "inorder":   self.in_order,
            "preorder":  self.pre_order,
            "postorder": self.post_order,
        }
        if order not in orders:
            raise ValueError(f"Unknown traversal order: {order}")
        return orders[order]()

    # ==================================================================
    # SNAPSHOT (layout-independent)
    # ==================================================================
    def nodes(self) -> List[TreeNode]:
        """All nodes in pre-order."""
        result: List[TreeNode] = []
        stack: List[TreeNode] = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            result.append(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def edges(self) -> List[Tuple[Number, Number]]:
        """(parent, child) value pairs in pre-order, left child first."""
        pairs: List[Tuple[Number, Number]] = []
        for node in self.nodes():
            if node.left is not None:
                pairs.append((node.value, node.left.value))
            if node.right is not None:
                pairs.append((node.value, node.right.value))
        return pairs

    def snapshot(self) -> Dict[str, Any]:
        """
        Everything a renderer needs to lay the tree out itself:
        child links, depth and subtree size for every node.
        """
        sizes = self._subtree_sizes()
        depths: Dict[int, int] = {}
        if self.root is not None:
            depths[id(self.root)] = 0
        records = []
        for node in self.nodes():
            depth = depths[id(node)]
            for child in (node.left, node.right):
                if child is not None:
                    depths[id(child)] = depth + 1
            records.append({
                "value": node.value,
                "left":  node.left.value if node.left else None,
                "right": node.right.value if node.right else None,
                "depth": depth,
                "size":  sizes[id(node)],
            })
        return {
            "root":       self.root.value if self.root else None,
            "node_count": self.node_count,
            "max_nodes":  self.max_nodes,
            "height":     self.height(),
            "nodes":      records,
            "edges":      [list(e) for e in self.edges()],
        }

    def _subtree_sizes(self) -> Dict[int, int]:
        sizes: Dict[int, int] = {}
        # children always come before parents in reversed pre-order
        for node in reversed(self.nodes()):
            sizes[id(node)] = (
                1
                + (sizes[id(node.left)] if node.left else 0)
                + (sizes[id(node.right)] if node.right else 0)
            )
        return sizes

    def __repr__(self) -> str:
        return f"BinarySearchTree(nodes={self.node_count}, max={self.max_nodes})"
