"""Renewable energy development assessment.

``metadata.total_rules_processed`` counts developments evaluated rather than
rule functions, since one rule is emitted per qualifying development.
"""

from site_risk.assessments.base import RuleAssessment
from site_risk.models.enums import Discipline, FeatureType


class RenewablesAssessment(RuleAssessment):
    """Nearby renewable energy developments and their planning status."""

    discipline = Discipline.RENEWABLES
    feature_types = (FeatureType.RENEWABLES,)
    rules_version = "renewables-rules-v1"
