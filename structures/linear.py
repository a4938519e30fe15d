"""
linear.py — Stack & Queue
==========================
The two sequential containers.  Neither needs step-by-step tracing
beyond its final contents, so both are thin wrappers around a list.

Empty-container policy:
  pop / dequeue / peek on an empty container return None.  Stored values
  are numbers, so None can never be mistaken for a real element, but
  callers still have to check before using the result.
"""

from collections import deque
from typing import Deque, Iterator, List, Optional, Union

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Stack — LIFO, top is the end of the list
# ---------------------------------------------------------------------------
class Stack:
    def __init__(self):
        self._items: List[Number] = []

    def push(self, value: Number) -> int:
        """Returns the index the value was stored at (the new top)."""
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> Optional[Number]:
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[Number]:
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def to_list(self) -> List[Number]:
        """Bottom first, top last."""
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Number]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Stack({self._items})"


# ---------------------------------------------------------------------------
# Queue — FIFO, front is the left end of the deque
# ---------------------------------------------------------------------------
class Queue:
    def __init__(self):
        self._items: Deque[Number] = deque()

    def enqueue(self, value: Number) -> int:
        """Returns the index the value was stored at (the new rear)."""
        self._items.append(value)
        return len(self._items) - 1

    def dequeue(self) -> Optional[Number]:
        if not self._items:
            return None
        return self._items.popleft()

    def peek(self) -> Optional[Number]:
        if not self._items:
            return None
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def to_list(self) -> List[Number]:
        """Front first, rear last."""
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Number]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"Queue({list(self._items)})"
