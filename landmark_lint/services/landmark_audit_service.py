"""
LandmarkAuditService - Turns landmark detection into structural findings.

Runs both detectors once per document, feeds them into the order checks and
reports:
- MISSING_MAIN: no primary content landmark detected
- NAV_AFTER_MAIN: navigation should precede main content
- MAIN_NOT_FIRST: main content should appear first
"""

import logging
from typing import Callable, List, Optional

from bs4 import Tag

from landmark_lint.analyzers import DOMParser, LandmarkDetector
from landmark_lint.contracts import (
    FindingType,
    LandmarkFinding,
    LandmarkInfo,
    LandmarkReport,
    Severity,
)
from landmark_lint.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


MESSAGES = {
    FindingType.MISSING_MAIN: "No primary content landmark detected",
    FindingType.NAV_AFTER_MAIN: "Navigation should precede main content",
    FindingType.MAIN_NOT_FIRST: "Main content should appear first",
}

SEVERITIES = {
    FindingType.MISSING_MAIN: Severity.WARNING,
    FindingType.NAV_AFTER_MAIN: Severity.INFORMATION,
    FindingType.MAIN_NOT_FIRST: Severity.HINT,
}


class LandmarkAuditService:
    """
    Audits documents for landmark presence and order.

    Typical use:
        service = LandmarkAuditService()
        report = service.audit(html)
        for finding in report.findings:
            print(finding.line, finding.message)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        detector: Optional[LandmarkDetector] = None,
    ):
        self._settings = settings or default_settings
        self._detector = detector or LandmarkDetector(
            min_nav_links=self._settings.NAV_MIN_LINKS
        )

    def audit(
        self,
        html: str,
        max_number_of_problems: Optional[int] = None,
        semantic_exclude: Optional[bool] = None,
    ) -> LandmarkReport:
        """
        Audit one HTML document.

        Args:
            html: Raw HTML
            max_number_of_problems: Per-call override of the finding limit
            semantic_exclude: Per-call override; when set, landmarks are
                still detected but no findings are raised

        Returns:
            LandmarkReport with detected landmarks and findings
        """
        if max_number_of_problems is None:
            max_number_of_problems = self._settings.MAX_NUMBER_OF_PROBLEMS
        if semantic_exclude is None:
            semantic_exclude = self._settings.SEMANTIC_EXCLUDE

        parser = DOMParser(html, features=self._settings.HTML_PARSER)
        main = self._detector.detect_main_content(parser)
        nav = self._detector.detect_navigation_content(parser)

        report = LandmarkReport(
            main=self._describe(parser, main, parser.is_main_landmark),
            navigation=self._describe(parser, nav, parser.is_navigation_landmark),
            nav_before_main=(
                main is not None
                and nav is not None
                and self._detector.is_nav_before_main(parser, main, nav)
            ),
            main_first=self._detector.is_main_first(
                parser, main, nav_exists=nav is not None
            ),
        )

        if not semantic_exclude:
            findings = self._collect_findings(parser, main, nav, report)
            report.findings = findings[:max_number_of_problems]
            report.truncated = len(findings) > len(report.findings)

        logger.info(
            f"Landmark audit: main={report.main.label if report.main else None}, "
            f"nav={report.navigation.label if report.navigation else None}, "
            f"{len(report.findings)} findings"
        )
        return report

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    def _collect_findings(
        self,
        parser: DOMParser,
        main: Optional[Tag],
        nav: Optional[Tag],
        report: LandmarkReport,
    ) -> List[LandmarkFinding]:
        findings = []

        if main is None:
            findings.append(self._finding(FindingType.MISSING_MAIN))
            return findings

        if nav is not None and not report.nav_before_main:
            findings.append(self._finding(FindingType.NAV_AFTER_MAIN, parser, nav))

        if not report.main_first:
            findings.append(self._finding(FindingType.MAIN_NOT_FIRST, parser, main))

        return findings

    def _finding(
        self,
        finding_type: FindingType,
        parser: Optional[DOMParser] = None,
        element: Optional[Tag] = None,
    ) -> LandmarkFinding:
        finding = LandmarkFinding(
            finding_type=finding_type,
            severity=SEVERITIES[finding_type],
            message=MESSAGES[finding_type],
        )
        if parser is not None and element is not None:
            finding.element = parser.describe(element)
            finding.line = parser.get_source_line(element)
        return finding

    def _describe(
        self,
        parser: DOMParser,
        element: Optional[Tag],
        is_explicit: Callable[[Tag], bool],
    ) -> Optional[LandmarkInfo]:
        if element is None:
            return None
        return LandmarkInfo(
            tag=element.name,
            label=parser.describe(element),
            line=parser.get_source_line(element),
            explicit=is_explicit(element),
        )


landmark_audit_service = LandmarkAuditService()
