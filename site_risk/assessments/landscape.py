"""Landscape assessment."""

from site_risk.assessments.base import RuleAssessment
from site_risk.models.enums import Discipline, FeatureType


class LandscapeAssessment(RuleAssessment):
    """Green belt, then AONB."""

    discipline = Discipline.LANDSCAPE
    feature_types = (FeatureType.GREEN_BELT, FeatureType.AONB)
    rules_version = "landscape-rules-v2"
