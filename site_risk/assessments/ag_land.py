"""Agricultural land assessment."""

from site_risk.assessments.base import RuleAssessment
from site_risk.models.enums import Discipline, FeatureType


class AgLandAssessment(RuleAssessment):
    """Agricultural Land Classification coverage of the site."""

    discipline = Discipline.AGRICULTURAL_LAND
    feature_types = (FeatureType.AG_LAND,)
    rules_version = "agland-rules-v2"
