"""
linked_list_ops.py — Linked List Operations
============================================
Generator-based traces for the singly linked list.  Every operation
that has to walk from the head yields one VISIT per node it passes, so
the renderer can move a cursor along the list before the link changes.

The walk is read from `to_list()` before the mutation; the mutation
itself happens exactly once, right before the INSERT / REMOVE step.
"""

from typing import Generator, List, Union

from structures import LinkedList, OpResult, Reason
from operations.step import Step, StepBuilder, StepKind

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
INSERT_HEAD_PSEUDOCODE: List[str] = [
    "def insert_at_head(value):",               # 0
    "    node ← new Node(value)",               # 1
    "    node.next ← head",                     # 2
    "    head ← node",                          # 3
]

INSERT_TAIL_PSEUDOCODE: List[str] = [
    "def insert_at_tail(value):",               # 0
    "    node ← new Node(value)",               # 1
    "    if head is null: head ← node; return", # 2
    "    current ← head",                       # 3
    "    while current.next is not null:",      # 4
    "        current ← current.next",           # 5
    "    current.next ← node",                  # 6
]

INSERT_AT_PSEUDOCODE: List[str] = [
    "def insert_at(value, position):",          # 0
    "    position ← clamp(position, 0, length)", # 1
    "    if position == 0: insert_at_head(value)", # 2
    "    current ← head",                       # 3
    "    repeat position - 1 times:",           # 4
    "        current ← current.next",           # 5
    "    node.next ← current.next",             # 6
    "    current.next ← node",                  # 7
]

DELETE_PSEUDOCODE: List[str] = [
    "def delete(value):",                       # 0
    "    if head is null: return",              # 1
    "    if head.value == value:",              # 2
    "        head ← head.next; return",         # 3
    "    current ← head",                       # 4
    "    while current.next.value != value:",   # 5
    "        current ← current.next",           # 6
    "    current.next ← current.next.next",     # 7
]

SEARCH_PSEUDOCODE: List[str] = [
    "def search(value):",                       # 0
    "    current ← head; position ← 0",         # 1
    "    while current is not null:",           # 2
    "        if current.value == value:",       # 3
    "            return position",              # 4
    "        current ← current.next",           # 5
    "        position ← position + 1",          # 6
    "    return -1",                            # 7
]


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------
def insert_head(lst: LinkedList, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["list"] = lst.to_list()

    yield sb.step(StepKind.START, subject=value, line=1,
                  note=f"Create a new node holding {value}.")

    position = lst.insert_at_head(value)
    sb.overlay["list"] = lst.to_list()
    yield sb.step(StepKind.INSERT, subject=value, locator=position, line=3,
                  note=f"Point the new node at the old head and make it the head. "
                       f"Inserting at the head is O(1).")
    return OpResult.ok(index=position, value=value)


def insert_tail(lst: LinkedList, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    values = lst.to_list()
    sb.overlay["list"] = values

    yield sb.step(StepKind.START, subject=value, line=1,
                  note=f"Create a new node holding {value}. There is no tail pointer, "
                       f"so we walk from the head.")

    for pos, current in enumerate(values):
        yield sb.step(StepKind.VISIT, subject=current, locator=pos, line=5,
                      note=f"Node {current} at position {pos}"
                           + (" is the last node." if pos == len(values) - 1 else " has a successor, keep walking."))

    position = lst.insert_at_tail(value)
    sb.overlay["list"] = lst.to_list()
    yield sb.step(StepKind.INSERT, subject=value, locator=position, line=6 if values else 2,
                  note=f"Link {value} after the last node (position {position})."
                       if values else f"The list was empty: {value} becomes the head.")
    return OpResult.ok(index=position, value=value)


def insert_at(lst: LinkedList, value: Number, position: int) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    values = lst.to_list()
    target = max(0, min(position, len(values)))
    sb.overlay["list"] = values

    note = f"Insert {value} at position {position}."
    if target != position:
        note += f" Position is clamped to {target} (list length {len(values)})."
    yield sb.step(StepKind.START, subject=value, locator=target, line=1, note=note)

    # walk to the predecessor at target - 1
    for pos in range(target):
        yield sb.step(StepKind.VISIT, subject=values[pos], locator=pos, line=5,
                      note=f"Walk to position {pos} (value {values[pos]}).")

    used = lst.insert_at_position(value, position)
    sb.overlay["list"] = lst.to_list()
    if used == 0:
        note = f"{value} becomes the new head."
    else:
        note = f"Link {value} after {values[used - 1]}; it now sits at position {used}."
    yield sb.step(StepKind.INSERT, subject=value, locator=used, line=2 if used == 0 else 7, note=note)
    return OpResult.ok(index=used, value=value)


def delete(lst: LinkedList, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    values = lst.to_list()
    sb.overlay["list"] = values

    yield sb.step(StepKind.START, subject=value, line=0,
                  note=f"Delete the first node holding {value}.")

    for pos, current in enumerate(values):
        if current == value:
            yield sb.step(StepKind.FOUND, subject=current, locator=pos, line=2 if pos == 0 else 5,
                          note=f"Found {value} at position {pos}.")
            lst.delete(value)
            sb.overlay["list"] = lst.to_list()
            yield sb.step(StepKind.REMOVE, subject=value, locator=pos, line=3 if pos == 0 else 7,
                          note="Move the head to the next node." if pos == 0
                          else f"Link {values[pos - 1]} past the removed node.")
            return OpResult.ok(index=pos, value=value)
        yield sb.step(StepKind.VISIT, subject=current, locator=pos, line=6,
                      note=f"{current} != {value}, move on.")

    yield sb.step(StepKind.NOT_FOUND, subject=value, line=1 if not values else 5,
                  note=f"{value} is not in the list. Nothing changes.")
    return OpResult.fail(Reason.NOT_FOUND, index=-1)


def search(lst: LinkedList, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    values = lst.to_list()
    sb.overlay["list"] = values

    yield sb.step(StepKind.START, subject=value, line=1,
                  note=f"Search for {value}, starting at the head.")

    for pos, current in enumerate(values):
        if current == value:
            yield sb.step(StepKind.FOUND, subject=current, locator=pos, line=4,
                          note=f"Found {value} at position {pos}.")
            return OpResult.ok(index=pos, value=value)
        yield sb.step(StepKind.VISIT, subject=current, locator=pos, line=5,
                      note=f"Position {pos} holds {current}, not {value}.")

    yield sb.step(StepKind.NOT_FOUND, subject=value, locator=-1, line=7,
                  note=f"Reached the end of the list: {value} not found (-1).")
    return OpResult.fail(Reason.NOT_FOUND, index=-1)
