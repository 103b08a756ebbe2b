"""OS priority pond rules."""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class PriorityPondRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "os_priority_ponds_on_site"
    WITHIN_250M = "os_priority_ponds_within_250m"


TABLE = (
    BucketRule(
        PriorityPondRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.MEDIUM,
        recommendations=(
            "Pond habitat survey required",
            "Retain ponds within the layout where possible or provide compensatory habitat",
        ),
    ),
    BucketRule(
        PriorityPondRule.WITHIN_250M,
        ProximityBucket.WITHIN_250M,
        RiskLevel.MEDIUM_LOW,
        recommendations=("Consider hydrological links between the site and nearby ponds",),
    ),
)

RULE_SET = proximity_rule_set(
    FeatureType.OS_PRIORITY_PONDS,
    PriorityPondRule,
    TABLE,
    title="Priority Pond",
    noun="priority pond",
)
