"""Linked list, stack and queue engines."""

import pytest

from structures import LinkedList, Queue, Stack


def _linked(*values):
    lst = LinkedList()
    for value in values:
        lst.insert_at_tail(value)
    return lst


# ---------------------------------------------------------------------------
# LinkedList
# ---------------------------------------------------------------------------
def test_linked_list_starts_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert lst.to_list() == []
    assert len(lst) == 0


def test_insert_at_head_and_tail():
    lst = LinkedList()
    assert lst.insert_at_tail(2) == 0
    assert lst.insert_at_head(1) == 0
    assert lst.insert_at_tail(3) == 2
    assert lst.to_list() == [1, 2, 3]


@pytest.mark.parametrize(
    "position, expected_used, expected_list",
    [
        (0, 0, [9, 1, 2, 3]),
        (1, 1, [1, 9, 2, 3]),
        (3, 3, [1, 2, 3, 9]),
        (10, 3, [1, 2, 3, 9]),
        (-4, 0, [9, 1, 2, 3]),
    ],
)
def test_insert_at_position_clamps(position, expected_used, expected_list):
    lst = _linked(1, 2, 3)
    assert lst.insert_at_position(9, position) == expected_used
    assert lst.to_list() == expected_list


def test_insert_at_position_on_empty_list():
    lst = LinkedList()
    assert lst.insert_at_position(7, 5) == 0
    assert lst.to_list() == [7]


def test_delete_removes_first_match_only():
    lst = _linked(1, 2, 1, 3)
    assert lst.delete(1) is True
    assert lst.to_list() == [2, 1, 3]
    assert lst.delete(3) is True
    assert lst.to_list() == [2, 1]


def test_delete_absent_value_is_not_an_error():
    lst = _linked(1, 2)
    assert lst.delete(42) is False
    assert lst.to_list() == [1, 2]
    assert LinkedList().delete(1) is False


def test_deleted_node_is_unlinked():
    lst = _linked(1, 2, 3)
    removed = lst.head.next
    lst.delete(2)
    assert removed.next is None
    assert lst.to_list() == [1, 3]


def test_search_returns_position_or_minus_one():
    lst = _linked(5, 6, 7)
    assert lst.search(5) == 0
    assert lst.search(7) == 2
    assert lst.search(8) == -1


def test_clear_empties_the_list():
    lst = _linked(1, 2, 3)
    lst.clear()
    assert lst.is_empty()
    assert list(lst) == []


# ---------------------------------------------------------------------------
# Stack / Queue
# ---------------------------------------------------------------------------
def test_stack_is_last_in_first_out():
    stack = Stack()
    stack.push(10)
    stack.push(20)
    assert stack.pop() == 20
    assert stack.to_list() == [10]
    assert stack.size() == 1


def test_queue_is_first_in_first_out():
    queue = Queue()
    queue.enqueue(10)
    queue.enqueue(20)
    assert queue.dequeue() == 10
    assert queue.to_list() == [20]
    assert queue.size() == 1


def test_empty_containers_return_none():
    stack, queue = Stack(), Queue()
    assert stack.pop() is None
    assert stack.peek() is None
    assert queue.dequeue() is None
    assert queue.peek() is None
    assert stack.is_empty() and queue.is_empty()


def test_push_and_enqueue_report_index():
    stack, queue = Stack(), Queue()
    assert [stack.push(v) for v in (1, 2, 3)] == [0, 1, 2]
    assert [queue.enqueue(v) for v in (1, 2, 3)] == [0, 1, 2]
    assert stack.peek() == 3
    assert queue.peek() == 1


def test_size_matches_items():
    stack = Stack()
    for v in range(5):
        stack.push(v)
    stack.pop()
    assert stack.size() == len(stack.to_list()) == 4
    stack.clear()
    assert stack.size() == 0
