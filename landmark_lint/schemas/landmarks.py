"""
Pydantic schemas for the landmark audit API.

These schemas define the REST contract used in landmark_lint/routers/landmarks.py
"""

from pydantic import BaseModel, Field
from typing import List, Optional


# ============== REQUEST ==============

class AuditRequest(BaseModel):
    """Request to audit an HTML document."""
    html: str = Field(..., min_length=1, description="HTML document to audit")
    max_number_of_problems: Optional[int] = Field(
        None, ge=0, description="Override the per-document finding limit"
    )
    semantic_exclude: Optional[bool] = Field(
        None, description="Detect landmarks but skip structural findings"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "html": "<body><nav>...</nav><main>...</main></body>"
            }
        }


# ============== RESPONSE ==============

class LandmarkResponse(BaseModel):
    """A detected landmark."""
    tag: str
    label: str
    line: Optional[int] = None
    explicit: bool


class FindingResponse(BaseModel):
    """A structural problem."""
    type: str
    severity: int  # 1=error, 2=warning, 3=information, 4=hint
    message: str
    element: Optional[str] = None
    line: Optional[int] = None


class AuditResponse(BaseModel):
    """Landmark audit of one document."""
    main: Optional[LandmarkResponse] = None
    navigation: Optional[LandmarkResponse] = None
    nav_before_main: bool
    main_first: bool
    findings: List[FindingResponse]
    truncated: bool = False
