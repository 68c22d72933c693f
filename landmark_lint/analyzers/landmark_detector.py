"""
Landmark Detector - Locate the main content and navigation regions.

Documents do not always tag their landmarks. When exactly one explicit
landmark exists it is used; when several exist the detector abstains; when
none exists a heuristic picks a candidate:

- Main content: the largest direct child of body, by serialized markup.
- Navigation: the shallowest block whose text is mostly link text,
  found breadth-first.

Usage:
    from landmark_lint.analyzers import DOMParser, LandmarkDetector

    parser = DOMParser(html_string)
    detector = LandmarkDetector()
    main = detector.detect_main_content(parser)
    nav = detector.detect_navigation_content(parser)
    if main is not None and nav is not None:
        ok = detector.is_nav_before_main(parser, main, nav)
"""

import logging
from typing import Optional

from bs4 import Tag

from .dom_parser import DOMParser
from .element_order import ElementComparisonResult, compare_element_order
from .element_queue import ElementQueue

logger = logging.getLogger(__name__)


class LandmarkDetector:
    """
    Detects landmark regions and checks their structural order.

    All methods are read-only over the DOMParser snapshot and keep no
    state between calls, so one detector can serve many documents.
    """

    DEFAULT_MIN_NAV_LINKS = 3

    def __init__(self, min_nav_links: int = DEFAULT_MIN_NAV_LINKS):
        """
        Args:
            min_nav_links: Links a block needs before it can be
                inferred as navigation
        """
        self.min_nav_links = min_nav_links

    # =========================================================================
    # DETECTION
    # =========================================================================

    def detect_main_content(self, parser: DOMParser) -> Optional[Tag]:
        """
        Find the primary content landmark.

        Args:
            parser: Parsed document

        Returns:
            The single explicit main landmark, the largest body child when
            none is tagged, or None if ambiguous or the body is empty
        """
        explicit = parser.main_landmarks
        if len(explicit) > 1:
            logger.debug(f"Ambiguous main content: {len(explicit)} candidates")
            return None
        if len(explicit) == 1:
            return explicit[0]

        # sorted() is stable, so equal sizes keep document order
        ranked = sorted(
            parser.get_body_children(),
            key=lambda child: len(parser.get_outer_html(child)),
            reverse=True,
        )
        if not ranked:
            return None

        logger.debug(f"Inferred main content: {parser.describe(ranked[0])}")
        return ranked[0]

    def detect_navigation_content(self, parser: DOMParser) -> Optional[Tag]:
        """
        Find the primary navigation landmark.

        Without an explicit landmark, body descendants are scanned
        breadth-first. A block qualifies when it has at least
        min_nav_links hyperlink children and its own text is no longer
        than the text of those links combined.

        Args:
            parser: Parsed document

        Returns:
            The single explicit navigation landmark, the first qualifying
            block in breadth-first order, or None
        """
        explicit = parser.navigation_landmarks
        if len(explicit) > 1:
            logger.debug(f"Ambiguous navigation: {len(explicit)} candidates")
            return None
        if len(explicit) == 1:
            return explicit[0]

        queue = ElementQueue(
            child for child in parser.get_body_children()
            if not parser.is_script(child)
        )

        while not queue.is_empty():
            element = queue.pop()
            link_count = 0
            link_text = ""
            for child in parser.get_children(element):
                queue.push(child)
                if parser.is_hyperlink(child):
                    link_count += 1
                    link_text += parser.get_text_content(child)

            if (
                link_count >= self.min_nav_links
                and len(parser.get_text_content(element)) <= len(link_text)
            ):
                logger.debug(
                    f"Inferred navigation: {parser.describe(element)} "
                    f"({link_count} links)"
                )
                return element

        return None

    # =========================================================================
    # ORDER CHECKS
    # =========================================================================

    def is_nav_before_main(
        self, parser: DOMParser, main: Optional[Tag], nav: Optional[Tag]
    ) -> bool:
        """
        Check that navigation precedes main content in document order.

        Returns:
            True only if nav is reached before main under body
        """
        result = compare_element_order(parser.body, nav, main)
        return result is ElementComparisonResult.FIRST

    def is_main_first(
        self, parser: DOMParser, main: Optional[Tag], nav_exists: bool = False
    ) -> bool:
        """
        Check that main content is the first body child.

        One preceding sibling is allowed when navigation exists. A missing
        main (or one nested below a body child) has index -1 and passes,
        so a failed detection never produces a diagnostic.

        Returns:
            True if the position of main is acceptable
        """
        index = parser.get_sibling_index(main)
        return index <= 0 or (nav_exists and index <= 1)

    def __repr__(self) -> str:
        return f"LandmarkDetector(min_nav_links={self.min_nav_links})"


_default_detector = LandmarkDetector()


def detect_main_content(parser: DOMParser) -> Optional[Tag]:
    """Find the primary content landmark with default thresholds."""
    return _default_detector.detect_main_content(parser)


def detect_navigation_content(parser: DOMParser) -> Optional[Tag]:
    """Find the primary navigation landmark with default thresholds."""
    return _default_detector.detect_navigation_content(parser)


def is_nav_before_main(
    parser: DOMParser, main: Optional[Tag], nav: Optional[Tag]
) -> bool:
    """Check that navigation precedes main content."""
    return _default_detector.is_nav_before_main(parser, main, nav)


def is_main_first(
    parser: DOMParser, main: Optional[Tag], nav_exists: bool = False
) -> bool:
    """Check that main content is the first body child."""
    return _default_detector.is_main_first(parser, main, nav_exists)
