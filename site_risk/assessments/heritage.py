"""Heritage assessment.

Listed buildings, conservation areas and scheduled monuments, in that order.
"""

from site_risk.assessments.base import RuleAssessment
from site_risk.models.enums import Discipline, FeatureType


class HeritageAssessment(RuleAssessment):
    """Heritage constraints: statutory listings and designated heritage assets."""

    discipline = Discipline.HERITAGE
    feature_types = (
        FeatureType.LISTED_BUILDINGS,
        FeatureType.CONSERVATION_AREAS,
        FeatureType.SCHEDULED_MONUMENTS,
    )
    rules_version = "heritage-rules-v2"
