"""
Analyzers - DOM snapshot and landmark analysis tools.

This module provides tools for analyzing HTML document structure:
- DOMParser: Parse HTML once and expose the landmark snapshot
- ElementQueue: FIFO worklist for breadth-first traversal
- compare_element_order: Pre-order document position comparison
- LandmarkDetector: Main/navigation detection and order checks

Usage:
    from landmark_lint.analyzers import (
        DOMParser,
        detect_main_content,
        detect_navigation_content,
        is_main_first,
    )

    parser = DOMParser(html)
    main = detect_main_content(parser)
    nav = detect_navigation_content(parser)
    print(is_main_first(parser, main, nav_exists=nav is not None))
"""

from .dom_parser import DOMParser
from .element_queue import ElementQueue
from .element_order import (
    ElementComparisonResult,
    compare_element_order,
)
from .landmark_detector import (
    LandmarkDetector,
    detect_main_content,
    detect_navigation_content,
    is_nav_before_main,
    is_main_first,
)

__all__ = [
    # DOM Parser
    "DOMParser",
    # Traversal
    "ElementQueue",
    "ElementComparisonResult",
    "compare_element_order",
    # Landmark Detector
    "LandmarkDetector",
    "detect_main_content",
    "detect_navigation_content",
    "is_nav_before_main",
    "is_main_first",
]
