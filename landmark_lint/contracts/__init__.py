"""
Contracts - Data structures for the landmark audit.

Provides:
- FindingType: Classification of structural problems
- Severity: Diagnostic severity levels
- LandmarkInfo, LandmarkFinding, LandmarkReport: Audit results
"""

from .landmarks import (
    FindingType,
    Severity,
    LandmarkInfo,
    LandmarkFinding,
    LandmarkReport,
)

__all__ = [
    "FindingType",
    "Severity",
    "LandmarkInfo",
    "LandmarkFinding",
    "LandmarkReport",
]
