"""
Landmarks router - structural accessibility audit of HTML documents.

Endpoints:
- POST /landmarks/audit: Detect main/navigation landmarks and report order problems
"""

import logging

from fastapi import APIRouter, HTTPException, status

from landmark_lint.schemas.landmarks import AuditRequest, AuditResponse
from landmark_lint.services.landmark_audit_service import landmark_audit_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/landmarks", tags=["landmarks"])


@router.post(
    "/audit",
    response_model=AuditResponse,
    summary="Audit landmark structure",
    description="""
    Detects the main content and navigation landmarks (explicit or inferred)
    and reports:
    - missing primary content landmark
    - navigation placed after main content
    - main content not first in the body
    """,
)
def audit_landmarks(request: AuditRequest):
    """Audit the landmark structure of an HTML document."""
    try:
        report = landmark_audit_service.audit(
            request.html,
            max_number_of_problems=request.max_number_of_problems,
            semantic_exclude=request.semantic_exclude,
        )
        return AuditResponse(**report.to_dict())

    except Exception as e:
        logger.error(f"Error auditing landmarks: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error auditing landmarks: {str(e)}"
        )
