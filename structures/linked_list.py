"""
linked_list.py — Singly Linked List
====================================
Plain head-only singly linked list of numbers.

Design decisions:
  - No tail pointer.  Tail and positional inserts walk from the head so
    the trace builder can show every hop.
  - Each ListNode is referenced by exactly one owner (its predecessor or
    `head`).  Unlinking a node clears its `next` so a stale reference can
    never reach back into the list.
  - Missing values are not errors: `search` returns -1 and `delete`
    returns False.
"""

from typing import Iterator, List, Optional, Union

Number = Union[int, float]


class ListNode:
    __slots__ = ("value", "next")

    def __init__(self, value: Number, next: Optional["ListNode"] = None):
        self.value: Number               = value
        self.next:  Optional["ListNode"] = next

    def __repr__(self) -> str:
        return f"ListNode({self.value})"


class LinkedList:
    """
    Attributes:
        head : First node, or None when the list is empty.
    """

    def __init__(self):
        self.head: Optional[ListNode] = None

    # ==================================================================
    # INSERTION
    # ==================================================================
    def insert_at_head(self, value: Number) -> int:
        """O(1).  Returns the position the value now occupies (always 0)."""
        self.head = ListNode(value, self.head)
        return 0

    def insert_at_tail(self, value: Number) -> int:
        """Walk to the last node and append.  Returns the new position."""
        if self.head is None:
            self.head = ListNode(value)
            return 0
        position = 1
        current = self.head
        while current.next is not None:
            current = current.next
            position += 1
        current.next = ListNode(value)
        return position

    def insert_at_position(self, value: Number, position: int) -> int:
        """
        Insert so that `value` ends up at `position`.

        The position is clamped to [0, len(self)]; anything past the end
        behaves as a tail insert.  Returns the position actually used.
        """
        if position <= 0 or self.head is None:
            return self.insert_at_head(value)

        current = self.head
        count = 0
        while current.next is not None and count < position - 1:
            current = current.next
            count += 1
        current.next = ListNode(value, current.next)
        return count + 1

    # ==================================================================
    # REMOVAL / LOOKUP
    # ==================================================================
    def delete(self, value: Number) -> bool:
        """Unlink the first node holding `value`.  False if none does."""
        if self.head is None:
            return False

        if self.head.value == value:
            removed = self.head
            self.head = removed.next
            removed.next = None
            return True

        current = self.head
        while current.next is not None and current.next.value != value:
            current = current.next
        if current.next is None:
            return False

        removed = current.next
        current.next = removed.next
        removed.next = None
        return True

    def search(self, value: Number) -> int:
        """0-based position of the first match, or -1."""
        for position, node_value in enumerate(self):
            if node_value == value:
                return position
        return -1

    # ==================================================================
    # SNAPSHOT
    # ==================================================================
    def to_list(self) -> List[Number]:
        return list(self)

    def is_empty(self) -> bool:
        return self.head is None

    def clear(self) -> None:
        # break every link so no node keeps its successor alive
        current = self.head
        self.head = None
        while current is not None:
            current.next, current = None, current.next

    def __iter__(self) -> Iterator[Number]:
        current = self.head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({' -> '.join(str(v) for v in self) or 'empty'})"
