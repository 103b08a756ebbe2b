"""Ecology assessment.

Covers OS priority ponds, Ramsar sites and great crested newt records.
"""

from site_risk.assessments.base import RuleAssessment
from site_risk.models.enums import Discipline, FeatureType


class EcologyAssessment(RuleAssessment):
    discipline = Discipline.ECOLOGY
    feature_types = (FeatureType.OS_PRIORITY_PONDS, FeatureType.RAMSAR, FeatureType.GCN)
    rules_version = "ecology-rules-v3"
