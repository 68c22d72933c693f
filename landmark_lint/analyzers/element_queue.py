"""
Element Queue - FIFO worklist for breadth-first DOM exploration.

Usage:
    queue = ElementQueue()
    queue.push(parser.body)
    while not queue.is_empty():
        element = queue.pop()
        ...
"""

from collections import deque
from typing import Deque, Iterable, Optional

from bs4 import Tag


class ElementQueue:
    """
    First-in first-out queue of Tag references.

    The queue never owns its elements; they stay in the document tree.
    Popping an empty queue returns None rather than a placeholder element,
    so callers should check is_empty() first.
    """

    def __init__(self, elements: Optional[Iterable[Tag]] = None):
        self._elements: Deque[Tag] = deque(elements or ())

    def push(self, element: Tag) -> None:
        """Append element to the back of the queue."""
        self._elements.append(element)

    def pop(self) -> Optional[Tag]:
        """Remove and return the front element, or None if the queue is empty."""
        if not self._elements:
            return None
        return self._elements.popleft()

    def is_empty(self) -> bool:
        """Check whether any elements remain."""
        return not self._elements

    def size(self) -> int:
        """Number of queued elements."""
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"ElementQueue(size={len(self._elements)})"
