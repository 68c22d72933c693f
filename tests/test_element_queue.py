"""
Unit tests for ElementQueue.

Tests FIFO ordering and the empty-queue contract.
"""

import pytest
from bs4 import BeautifulSoup

from landmark_lint.analyzers import ElementQueue


@pytest.fixture
def items():
    """Three sibling list items."""
    soup = BeautifulSoup("<ul><li>a</li><li>b</li><li>c</li></ul>", "html.parser")
    return soup.find_all("li")


class TestElementQueue:
    """Tests for queue operations."""

    def test_new_queue_is_empty(self):
        """A fresh queue has no elements."""
        queue = ElementQueue()
        assert queue.is_empty() is True
        assert queue.size() == 0
        assert len(queue) == 0

    def test_fifo_order(self, items):
        """Elements come out in the order they went in."""
        queue = ElementQueue()
        for item in items:
            queue.push(item)

        assert queue.size() == 3
        popped = [queue.pop() for _ in range(3)]
        assert [p.get_text() for p in popped] == ["a", "b", "c"]
        assert queue.is_empty() is True

    def test_pop_returns_same_objects(self, items):
        """The queue holds references, not copies."""
        queue = ElementQueue(items)
        assert queue.pop() is items[0]

    def test_pop_empty_returns_none(self):
        """Popping an empty queue yields None instead of a placeholder."""
        queue = ElementQueue()
        assert queue.pop() is None
        assert queue.size() == 0

    def test_pop_after_drain_returns_none(self, items):
        """Once drained, further pops yield None."""
        queue = ElementQueue(items[:1])
        assert queue.pop() is items[0]
        assert queue.pop() is None

    def test_seed_from_iterable(self, items):
        """Constructor accepts any iterable, including generators."""
        queue = ElementQueue(item for item in items)
        assert queue.size() == 3

    def test_repr(self, items):
        """Should have meaningful repr."""
        assert "size=3" in repr(ElementQueue(items))
