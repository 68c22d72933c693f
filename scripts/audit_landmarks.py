#!/usr/bin/env python3
"""
Audit the landmark structure of HTML files on disk.

Usage:
    python scripts/audit_landmarks.py page.html other.html
    python scripts/audit_landmarks.py --json page.html

Exit status: 0 if no findings, 1 if any finding was raised, 2 if a file
could not be read.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Adjust path so imports resolve when running from project root
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from landmark_lint.core.config import settings
from landmark_lint.services.landmark_audit_service import LandmarkAuditService

logger = logging.getLogger("audit_landmarks")

SEVERITY_NAMES = {1: "error", 2: "warning", 3: "information", 4: "hint"}


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Audit HTML landmark structure.")
    parser.add_argument("files", nargs="+", type=Path, help="HTML files to audit")
    parser.add_argument("--json", action="store_true", help="Print reports as JSON")
    parser.add_argument(
        "--max-problems",
        type=int,
        default=None,
        help="Findings reported per file (default: MAX_NUMBER_OF_PROBLEMS)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.WARNING)

    service = LandmarkAuditService()
    reports = {}
    unreadable = 0
    found = 0

    for path in args.files:
        try:
            html = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {path}: {e}")
            unreadable += 1
            continue

        report = service.audit(html, max_number_of_problems=args.max_problems)
        reports[str(path)] = report.to_dict()
        found += len(report.findings)

        if not args.json:
            for finding in report.findings:
                line = finding.line if finding.line is not None else 1
                print(
                    f"{path}:{line}: {SEVERITY_NAMES[int(finding.severity)]}: "
                    f"{finding.message}"
                )

    if args.json:
        print(json.dumps(reports, indent=2))

    if unreadable:
        return 2
    return 1 if found else 0


if __name__ == '__main__':
    sys.exit(main())
