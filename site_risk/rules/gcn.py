"""Great crested newt (GCN) record rules.

250m matches the usual terrestrial buffer around GCN breeding ponds.
"""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class GcnRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "gcn_on_site"
    WITHIN_250M = "gcn_within_250m"


TABLE = (
    BucketRule(
        GcnRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.HIGH,
        recommendations=(
            "Great crested newt surveys or District Level Licensing required",
            "A European Protected Species licence may be needed before works start",
        ),
        impact="Development may directly affect a European Protected Species",
    ),
    BucketRule(
        GcnRule.WITHIN_250M,
        ProximityBucket.WITHIN_250M,
        RiskLevel.MEDIUM_HIGH,
        recommendations=("Great crested newt presence/absence survey of ponds within 250m",),
    ),
)

RULE_SET = proximity_rule_set(
    FeatureType.GCN,
    GcnRule,
    TABLE,
    title="Great Crested Newt Records",
    noun="great crested newt record",
)
