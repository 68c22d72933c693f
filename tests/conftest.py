"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- HTML page builder
- DOMParser factory
- Test client (FastAPI TestClient)
"""

import logging
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from landmark_lint.analyzers import DOMParser
from landmark_lint.main import app


# Configure logging for tests
logging.basicConfig(level=logging.INFO)


# ---------------------------------------------------------------------------
# HTML FIXTURES
# ---------------------------------------------------------------------------

def build_page(*body_parts: str) -> str:
    """Wrap body fragments in a minimal HTML document."""
    body = "\n".join(body_parts)
    return (
        "<!DOCTYPE html>\n"
        "<html lang=\"en\">\n"
        "<head><title>Test</title></head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


@pytest.fixture
def page() -> Callable[..., str]:
    """Return the page builder."""
    return build_page


@pytest.fixture
def parse() -> Callable[..., DOMParser]:
    """Return a function that builds a page from body fragments and parses it."""
    def _parse(*body_parts: str) -> DOMParser:
        return DOMParser(build_page(*body_parts))
    return _parse


# ---------------------------------------------------------------------------
# CLIENT FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
