"""
Element Order - Decide which of two elements comes first in the document.

The walk is a pre-order depth-first traversal from a search root: a node is
visited before its children, and children left to right. The first target
reached decides the result, and the walk stops there.

Usage:
    from landmark_lint.analyzers import compare_element_order, ElementComparisonResult

    result = compare_element_order(parser.body, nav, main)
    if result is ElementComparisonResult.FIRST:
        print("nav comes first")
"""

from enum import Enum
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag


class ElementComparisonResult(Enum):
    """Outcome of comparing the document order of two elements."""

    FIRST = "first"
    """The first target is reached first."""

    SECOND = "second"
    """The second target is reached first."""

    NONE = "none"
    """Neither target lies under the search root."""


def compare_element_order(
    root: Union[Tag, BeautifulSoup, None],
    first: Optional[Tag],
    second: Optional[Tag],
) -> ElementComparisonResult:
    """
    Determine which of two elements occurs first under root.

    Targets are matched by identity. When both targets are the same
    element the result is FIRST.

    Args:
        root: Search root, normally the document body (None gives NONE)
        first: First target element
        second: Second target element

    Returns:
        ElementComparisonResult for the first target reached, or NONE
    """
    if root is None:
        return ElementComparisonResult.NONE

    stack: List[Tag] = [root]
    while stack:
        node = stack.pop()
        if node is first:
            return ElementComparisonResult.FIRST
        if node is second:
            return ElementComparisonResult.SECOND

        # Reversed so the leftmost child is popped next
        children = [child for child in node.children if isinstance(child, Tag)]
        stack.extend(reversed(children))

    return ElementComparisonResult.NONE
