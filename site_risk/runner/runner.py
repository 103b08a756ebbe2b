"""Assessment execution

This module provides a runner for the pluggable discipline assessments.
"""

import logging
from collections.abc import Mapping
from typing import Any

from site_risk.assessments.ag_land import AgLandAssessment
from site_risk.assessments.base import RuleAssessment
from site_risk.assessments.ecology import EcologyAssessment
from site_risk.assessments.heritage import HeritageAssessment
from site_risk.assessments.landscape import LandscapeAssessment
from site_risk.assessments.renewables import RenewablesAssessment
from site_risk.config import DEFAULT_RULES_CONFIG, RulesConfig
from site_risk.models.domain import DisciplineAssessment
from site_risk.models.enums import Discipline
from site_risk.validation.features import ParsedAnalysis

logger = logging.getLogger(__name__)


# Registration order is the order disciplines appear in a site report
ASSESSMENT_TYPES: dict[Discipline, type[RuleAssessment]] = {
    Discipline.HERITAGE: HeritageAssessment,
    Discipline.LANDSCAPE: LandscapeAssessment,
    Discipline.ECOLOGY: EcologyAssessment,
    Discipline.AGRICULTURAL_LAND: AgLandAssessment,
    Discipline.RENEWABLES: RenewablesAssessment,
}


def run_assessment(
    discipline: Discipline | str,
    analysis: ParsedAnalysis | Mapping[str, Any] | None,
    config: RulesConfig = DEFAULT_RULES_CONFIG,
) -> DisciplineAssessment:
    """Run one discipline assessment.

    This is the main entry point for evaluating a single discipline. It looks
    up the assessment class, instantiates it, and executes it.

    Args:
        discipline: Discipline identifier (e.g., "heritage", "ag_land")
        analysis: Parsed analysis or raw ``{feature_type: [records]}`` payload
        config: Rules configuration

    Returns:
        The discipline assessment

    Raises:
        KeyError: If the discipline is not registered
        ValueError: If the assessment fails to instantiate or run
    """
    try:
        discipline = Discipline(discipline)
    except ValueError:
        msg = f"Discipline {discipline} not supported"
        raise KeyError(msg) from None

    assessment_class = ASSESSMENT_TYPES.get(discipline)
    if assessment_class is None:
        msg = f"Discipline {discipline.value} not supported"
        raise KeyError(msg)

    logger.info(f"Instantiating {assessment_class.__name__}")
    try:
        assessment = assessment_class(analysis, config)
    except Exception as e:
        logger.error(f"Assessment instantiation failed: {e}")
        msg = f"Failed to instantiate assessment '{discipline.value}'"
        raise ValueError(msg) from e

    try:
        result = assessment.run()
    except Exception as e:
        logger.error(f"Assessment execution failed: {e}")
        msg = f"Assessment '{discipline.value}' execution failed"
        raise ValueError(msg) from e

    if not isinstance(result, DisciplineAssessment):
        msg = (
            f"Assessment '{discipline.value}'.run() must return a DisciplineAssessment, "
            f"got {type(result).__name__}"
        )
        raise ValueError(msg)

    return result
