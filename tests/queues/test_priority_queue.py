"""
Tests for the min-priority queue.

Validates:
    - Emptiness tracking and size changes
    - Lowest priority served first, earliest insertion wins ties
    - Empty reads return None instead of raising
    - peek() never mutates
"""

import pytest

from pystructures import PriorityQueue


@pytest.fixture
def abc_queue():
    q = PriorityQueue()
    q.enqueue("a", 3)
    q.enqueue("b", 1)
    q.enqueue("c", 2)
    return q


class TestEmptiness:

    def test_fresh_queue_is_empty(self):
        q = PriorityQueue()
        assert q.is_empty
        assert len(q) == 0
        assert not q

    def test_not_empty_after_enqueue(self):
        q = PriorityQueue()
        q.enqueue("x", 5)
        assert not q.is_empty
        assert len(q) == 1
        assert q

    def test_empty_reads_return_none(self):
        q = PriorityQueue()
        assert q.peek() is None
        assert q.dequeue() is None
        assert q.is_empty


class TestOrdering:

    def test_lowest_priority_first(self, abc_queue):
        assert abc_queue.peek() == "b"
        assert abc_queue.dequeue() == "b"
        assert abc_queue.dequeue() == "c"
        assert abc_queue.dequeue() == "a"
        assert abc_queue.dequeue() is None

    def test_ties_favor_earliest_insertion(self):
        q = PriorityQueue()
        q.enqueue("x", 1)
        q.enqueue("y", 1)
        assert q.peek() == "x"
        assert q.dequeue() == "x"
        assert q.dequeue() == "y"

    def test_negative_priorities(self):
        q = PriorityQueue()
        q.enqueue("low", 0)
        q.enqueue("urgent", -10)
        assert q.dequeue() == "urgent"

    def test_duplicates_allowed(self):
        q = PriorityQueue()
        q.enqueue("same", 2)
        q.enqueue("same", 2)
        assert len(q) == 2
        assert q.dequeue() == "same"
        assert q.dequeue() == "same"
        assert q.is_empty

    def test_interleaved_operations(self):
        q = PriorityQueue()
        q.enqueue(10, 5)
        q.enqueue(20, 4)
        assert q.dequeue() == 20
        q.enqueue(30, 5)
        q.enqueue(40, 1)
        assert q.dequeue() == 40
        # 10 was inserted before 30 at the same priority
        assert q.dequeue() == 10
        assert q.dequeue() == 30


class TestSizeAccounting:

    def test_dequeue_removes_exactly_one(self, abc_queue):
        abc_queue.dequeue()
        assert len(abc_queue) == 2

    def test_peek_does_not_remove(self, abc_queue):
        for _ in range(3):
            assert abc_queue.peek() == "b"
        assert len(abc_queue) == 3

    def test_repr(self, abc_queue):
        assert repr(abc_queue) == "PriorityQueue(size=3)"
