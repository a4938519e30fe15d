"""
structures/
-----------
Core data layer.  Public API:

    from structures import LinkedList, Stack, Queue
    from structures import BinarySearchTree, HashTable, Graph
    from structures import OpResult, Reason
"""

from structures.results     import OpResult, Reason
from structures.linked_list import LinkedList, ListNode
from structures.linear      import Stack, Queue
from structures.bst         import BinarySearchTree, TreeNode, DEFAULT_MAX_NODES
from structures.hash_table  import HashTable, HashEntry, DEFAULT_BUCKET_COUNT, char_code_total
from structures.graph       import Graph

__all__ = [
    "OpResult",         "Reason",
    "LinkedList",       "ListNode",
    "Stack",            "Queue",
    "BinarySearchTree", "TreeNode",  "DEFAULT_MAX_NODES",
    "HashTable",        "HashEntry", "DEFAULT_BUCKET_COUNT", "char_code_total",
    "Graph",
]
