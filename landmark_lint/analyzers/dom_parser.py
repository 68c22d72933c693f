"""
DOM Parser - HTML parsing and landmark snapshot using BeautifulSoup.

This module provides the read-only document every landmark analysis works on.
The markup is parsed once, and the explicit landmark elements are collected
up front so the detectors always see one consistent snapshot.

Usage:
    from landmark_lint.analyzers import DOMParser

    parser = DOMParser(html_string)
    for child in parser.get_body_children():
        print(parser.describe(child), parser.get_source_line(child))
"""

import re
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from landmark_lint.core.config import settings


_WHITESPACE = re.compile(r"\s")


class DOMParser:
    """
    HTML parser using BeautifulSoup for landmark analysis.

    Provides:
    - The document body (or <html> / the fragment root when <body> is omitted)
    - Explicit main / navigation landmarks, materialized at construction
    - Element classification (hyperlink, script)
    - Element traversal and text helpers
    """

    MAIN_TAG = "main"
    MAIN_ROLE = "main"
    NAVIGATION_TAG = "nav"
    NAVIGATION_ROLE = "navigation"

    # Tags that carry a hyperlink when they have an href attribute
    HYPERLINK_TAGS = {"a", "area"}

    def __init__(self, html: str, features: Optional[str] = None):
        """
        Initialize parser with HTML content.

        Args:
            html: Raw HTML string to parse
            features: BeautifulSoup tree builder (defaults to settings.HTML_PARSER)
        """
        self._html = html
        self._soup = BeautifulSoup(html, features or settings.HTML_PARSER)
        self._body = self._find_body()
        self._main_landmarks = tuple(
            self._find_landmarks(self.MAIN_TAG, self.MAIN_ROLE)
        )
        self._navigation_landmarks = tuple(
            self._find_landmarks(self.NAVIGATION_TAG, self.NAVIGATION_ROLE)
        )

    @property
    def soup(self) -> BeautifulSoup:
        """Access the underlying BeautifulSoup object."""
        return self._soup

    @property
    def html(self) -> str:
        """Access the original HTML string."""
        return self._html

    @property
    def body(self) -> Union[Tag, BeautifulSoup]:
        """
        The document body.

        When the <body> tag is omitted the <html> element stands in (its
        <head> is skipped by get_body_children). Fragments without <html>
        use the parsed document root, so their top-level elements play the
        role of body children.
        """
        return self._body

    @property
    def main_landmarks(self) -> Tuple[Tag, ...]:
        """Elements explicitly marked as main content, in document order."""
        return self._main_landmarks

    @property
    def navigation_landmarks(self) -> Tuple[Tag, ...]:
        """Elements explicitly marked as navigation, in document order."""
        return self._navigation_landmarks

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def is_main_landmark(self, element: Tag) -> bool:
        """Check if element is tagged as the main content landmark."""
        return self._is_landmark(element, self.MAIN_TAG, self.MAIN_ROLE)

    def is_navigation_landmark(self, element: Tag) -> bool:
        """Check if element is tagged as the navigation landmark."""
        return self._is_landmark(element, self.NAVIGATION_TAG, self.NAVIGATION_ROLE)

    def is_hyperlink(self, element: Tag) -> bool:
        """
        Check if element carries a hyperlink target.

        Any href counts, including an empty one: browsers resolve it to
        the document URL.
        """
        return element.name in self.HYPERLINK_TAGS and element.has_attr("href")

    def is_script(self, element: Tag) -> bool:
        """Check if element is a <script>."""
        return element.name == "script"

    # =========================================================================
    # ELEMENT TRAVERSAL
    # =========================================================================

    def get_children(self, element: Union[Tag, BeautifulSoup, None]) -> List[Tag]:
        """
        Get direct element children (text and comments are skipped).

        Args:
            element: Parent element, or None

        Returns:
            List of direct child Tags (empty for None)
        """
        if element is None:
            return []
        return [child for child in element.children if isinstance(child, Tag)]

    def get_body_children(self) -> List[Tag]:
        """Get the body's direct element children (never <head>)."""
        return [
            child for child in self.get_children(self._body)
            if child.name != "head"
        ]

    def get_sibling_index(self, element: Optional[Tag]) -> int:
        """
        Position of element among the body's direct children.

        Compared by identity: BeautifulSoup treats tags with the same
        markup as equal.

        Returns:
            Zero-based index, or -1 if element is None or not a body child
        """
        if element is None:
            return -1
        for index, child in enumerate(self.get_body_children()):
            if child is element:
                return index
        return -1

    # =========================================================================
    # CONTEXT AND METADATA
    # =========================================================================

    def get_text_content(self, element: Tag) -> str:
        """
        Get text content of an element with all whitespace removed.

        Args:
            element: Target element

        Returns:
            Concatenated text without any whitespace characters
        """
        return _WHITESPACE.sub("", element.get_text())

    def get_outer_html(self, element: Tag) -> str:
        """Serialized markup of the element, including its own tags."""
        return str(element)

    def get_source_line(self, element: Tag) -> Optional[int]:
        """
        Get the source line number of an element.

        Only available for tree builders that track positions
        ("html.parser" and "html5lib").

        Returns:
            Line number (1-indexed) or None
        """
        return element.sourceline

    def describe(self, element: Tag) -> str:
        """
        Short label for an element: tag, then #id and up to two classes.

        Example: "div#menu.links.top"
        """
        label = element.name
        if element.get("id"):
            label += f"#{element['id']}"
        classes = element.get("class", [])
        if classes:
            label += "." + ".".join(classes[:2])
        return label

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _find_body(self) -> Union[Tag, BeautifulSoup]:
        if self._soup.body is not None:
            return self._soup.body
        if self._soup.html is not None:
            return self._soup.html
        return self._soup

    def _find_landmarks(self, tag_name: str, role: str) -> List[Tag]:
        return self._soup.find_all(
            lambda el: self._is_landmark(el, tag_name, role)
        )

    def _is_landmark(self, element: Tag, tag_name: str, role: str) -> bool:
        if element.name == tag_name:
            return True
        roles = element.get("role")
        if not roles:
            return False
        if isinstance(roles, list):
            roles = " ".join(roles)
        return role in roles.lower().split()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"DOMParser(main={len(self._main_landmarks)}, "
            f"nav={len(self._navigation_landmarks)})"
        )
