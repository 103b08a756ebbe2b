"""Assessment endpoints.

- POST /assess:              Assess a site across disciplines, returns ``structuredReport``
- POST /assess/{discipline}: Assess one discipline, returns the discipline assessment
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from site_risk.config import RulesConfig
from site_risk.models.enums import Discipline
from site_risk.orchestrator import SiteAssessor
from site_risk.runner.runner import run_assessment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assess")


class DisciplineAssessmentRequest(BaseModel):
    """Request body for a single-discipline assessment."""

    analysis: dict[str, Any] = Field(
        default_factory=dict,
        description="Spatial analysis results keyed by feature type (e.g. listed_buildings)",
    )


class SiteAssessmentRequest(DisciplineAssessmentRequest):
    """Request body for a whole-site assessment."""

    disciplines: list[Discipline] | None = Field(
        default=None,
        description="Disciplines to assess (default: all)",
    )


@router.post("")
def post_site_assessment(request: SiteAssessmentRequest) -> dict[str, Any]:
    """Assess a site and return the structured report.

    Args:
        request: Analysis payload and optional discipline filter

    Returns:
        ``{"structuredReport": {"summary": ..., "disciplines": [...]}}``
    """
    site = SiteAssessor(RulesConfig()).assess(request.analysis, request.disciplines)
    return site.to_structured_report()


@router.post("/{discipline}")
def post_discipline_assessment(
    discipline: str, request: DisciplineAssessmentRequest
) -> dict[str, Any]:
    """Assess a single discipline.

    Raises:
        HTTPException 404: If the discipline is unknown
        HTTPException 500: If the assessment fails
    """
    try:
        selected = Discipline(discipline)
    except ValueError:
        raise HTTPException(
            status_code=404, detail=f"Unknown discipline: {discipline}"
        ) from None

    try:
        assessment = run_assessment(selected, request.analysis, RulesConfig())
    except ValueError as e:
        logger.exception(f"{selected.value} assessment failed")
        raise HTTPException(status_code=500, detail=str(e)) from e

    return assessment.model_dump(by_alias=True, mode="json")
