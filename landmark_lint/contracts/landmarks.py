"""
Landmarks - Data structures for landmark audit results.

These structures carry information out of the audit:
1. LandmarkInfo: A detected landmark and how it was found
2. LandmarkFinding: One structural problem to report
3. LandmarkReport: Everything the audit learned about a document
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional


class FindingType(Enum):
    """Structural landmark problems."""

    MISSING_MAIN = "missing_main"
    """No primary content landmark could be detected."""

    NAV_AFTER_MAIN = "nav_after_main"
    """Navigation appears after the main content."""

    MAIN_NOT_FIRST = "main_not_first"
    """Main content is preceded by other body content."""


class Severity(IntEnum):
    """Diagnostic severity, numbered like editor protocol severities."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3
    HINT = 4


@dataclass
class LandmarkInfo:
    """A detected landmark element."""

    tag: str
    """Tag name of the element."""

    label: str
    """Short tag#id.class label."""

    line: Optional[int] = None
    """Source line, when the parser tracks it."""

    explicit: bool = False
    """True if tagged as the landmark, False if inferred."""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "label": self.label,
            "line": self.line,
            "explicit": self.explicit,
        }


@dataclass
class LandmarkFinding:
    """A structural problem found in a document."""

    finding_type: FindingType
    severity: Severity
    message: str
    element: Optional[str] = None
    """Label of the element the finding points at."""

    line: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.finding_type.value,
            "severity": int(self.severity),
            "message": self.message,
            "element": self.element,
            "line": self.line,
        }


@dataclass
class LandmarkReport:
    """Result of auditing one document."""

    main: Optional[LandmarkInfo] = None
    navigation: Optional[LandmarkInfo] = None
    nav_before_main: bool = False
    main_first: bool = True
    findings: List[LandmarkFinding] = field(default_factory=list)
    truncated: bool = False
    """True if findings were cut at the per-document limit."""

    @property
    def has_findings(self) -> bool:
        return bool(self.findings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "main": self.main.to_dict() if self.main else None,
            "navigation": self.navigation.to_dict() if self.navigation else None,
            "nav_before_main": self.nav_before_main,
            "main_first": self.main_first,
            "findings": [f.to_dict() for f in self.findings],
            "truncated": self.truncated,
        }
