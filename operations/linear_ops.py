"""
linear_ops.py — Stack & Queue Operations
=========================================
Stacks and queues only touch one end, so their traces are short:
announce, point at the end being used, change it.

An empty pop / dequeue / peek is not an error.  It yields a REJECT step
and returns OpResult(success=False, reason=EMPTY) with no value.
"""

from typing import Generator, List, Union

from structures import OpResult, Queue, Reason, Stack
from operations.step import Step, StepBuilder, StepKind

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PUSH_PSEUDOCODE: List[str] = [
    "def push(value):",                         # 0
    "    items.append(value)",                  # 1
    "    top ← top + 1",                        # 2
]

POP_PSEUDOCODE: List[str] = [
    "def pop():",                               # 0
    "    if is_empty(): return NONE",           # 1
    "    value ← items[top]",                   # 2
    "    top ← top - 1",                        # 3
    "    return value",                         # 4
]

STACK_PEEK_PSEUDOCODE: List[str] = [
    "def peek():",                              # 0
    "    if is_empty(): return NONE",           # 1
    "    return items[top]",                    # 2
]

ENQUEUE_PSEUDOCODE: List[str] = [
    "def enqueue(value):",                      # 0
    "    items.append_rear(value)",             # 1
]

DEQUEUE_PSEUDOCODE: List[str] = [
    "def dequeue():",                           # 0
    "    if is_empty(): return NONE",           # 1
    "    value ← items[front]",                 # 2
    "    front ← front + 1",                    # 3
    "    return value",                         # 4
]

QUEUE_PEEK_PSEUDOCODE: List[str] = [
    "def peek():",                              # 0
    "    if is_empty(): return NONE",           # 1
    "    return items[front]",                  # 2
]


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def push(stack: Stack, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = stack.to_list()
    yield sb.step(StepKind.START, subject=value, locator=stack.size(), line=0,
                  note=f"Push {value} onto the top of the stack.")

    index = stack.push(value)
    sb.overlay["items"] = stack.to_list()
    yield sb.step(StepKind.INSERT, subject=value, locator=index, line=1,
                  note=f"{value} is the new top (size {stack.size()}).")
    return OpResult.ok(index=index, value=value)


def pop(stack: Stack) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = stack.to_list()
    if stack.is_empty():
        yield sb.step(StepKind.REJECT, line=1, note="The stack is empty: nothing to pop.")
        return OpResult.fail(Reason.EMPTY)

    index = stack.size() - 1
    top = stack.peek()
    yield sb.step(StepKind.VISIT, subject=top, locator=index, line=2,
                  note=f"The top element is {top}.")

    value = stack.pop()
    sb.overlay["items"] = stack.to_list()
    yield sb.step(StepKind.REMOVE, subject=value, locator=index, line=3,
                  note=f"Pop {value}. Last in, first out.")
    return OpResult.ok(index=index, value=value)


def stack_peek(stack: Stack) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = stack.to_list()
    if stack.is_empty():
        yield sb.step(StepKind.REJECT, line=1, note="The stack is empty: nothing to peek at.")
        return OpResult.fail(Reason.EMPTY)

    index = stack.size() - 1
    value = stack.peek()
    yield sb.step(StepKind.FOUND, subject=value, locator=index, line=2,
                  note=f"The top element is {value}; the stack is unchanged.")
    return OpResult.ok(index=index, value=value)


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def enqueue(queue: Queue, value: Number) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = queue.to_list()
    yield sb.step(StepKind.START, subject=value, locator=queue.size(), line=0,
                  note=f"Enqueue {value} at the rear of the queue.")

    index = queue.enqueue(value)
    sb.overlay["items"] = queue.to_list()
    yield sb.step(StepKind.INSERT, subject=value, locator=index, line=1,
                  note=f"{value} joins the rear (size {queue.size()}).")
    return OpResult.ok(index=index, value=value)


def dequeue(queue: Queue) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = queue.to_list()
    if queue.is_empty():
        yield sb.step(StepKind.REJECT, line=1, note="The queue is empty: nothing to dequeue.")
        return OpResult.fail(Reason.EMPTY)

    front = queue.peek()
    yield sb.step(StepKind.VISIT, subject=front, locator=0, line=2,
                  note=f"The front element is {front}.")

    value = queue.dequeue()
    sb.overlay["items"] = queue.to_list()
    yield sb.step(StepKind.REMOVE, subject=value, locator=0, line=3,
                  note=f"Dequeue {value}. First in, first out.")
    return OpResult.ok(index=0, value=value)


def queue_peek(queue: Queue) -> Generator[Step, None, OpResult]:
    sb = StepBuilder()
    sb.overlay["items"] = queue.to_list()
    if queue.is_empty():
        yield sb.step(StepKind.REJECT, line=1, note="The queue is empty: nothing to peek at.")
        return OpResult.fail(Reason.EMPTY)

    value = queue.peek()
    yield sb.step(StepKind.FOUND, subject=value, locator=0, line=2,
                  note=f"The front element is {value}; the queue is unchanged.")
    return OpResult.ok(index=0, value=value)
