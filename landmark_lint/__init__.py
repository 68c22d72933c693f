"""
Landmark Lint - structural accessibility checks for HTML documents.

Finds the primary content and navigation landmarks of a page (explicit or
inferred) and reports when they are missing or out of order.
"""

__version__ = "0.1.0"
