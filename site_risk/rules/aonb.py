"""Area of Outstanding Natural Beauty (AONB) rules."""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class AonbRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "aonb_on_site"
    WITHIN_50M = "aonb_within_50m"
    WITHIN_100M = "aonb_within_100m"
    WITHIN_250M = "aonb_within_250m"
    WITHIN_500M = "aonb_within_500m"
    WITHIN_1KM = "aonb_within_1km"
    WITHIN_3KM = "aonb_within_3km"
    WITHIN_5KM = "aonb_within_5km"


TABLE = (
    BucketRule(
        AonbRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.EXTREMELY_HIGH,
        recommendations=(
            "Major planning weight will be given to conserving and enhancing landscape "
            "and scenic beauty",
            "Early engagement with landscape specialists required",
        ),
        impact="Development within a nationally designated landscape",
    ),
    BucketRule(
        AonbRule.WITHIN_50M,
        ProximityBucket.WITHIN_50M,
        RiskLevel.HIGH,
        recommendations=("Detailed LVIA with viewpoints adjacent to AONB",),
    ),
    BucketRule(
        AonbRule.WITHIN_100M,
        ProximityBucket.WITHIN_100M,
        RiskLevel.HIGH,
        recommendations=("LVIA including intervisibility analysis",),
    ),
    BucketRule(
        AonbRule.WITHIN_250M,
        ProximityBucket.WITHIN_250M,
        RiskLevel.MEDIUM_HIGH,
        recommendations=("Landscape strategy to avoid harm to setting",),
    ),
    BucketRule(
        AonbRule.WITHIN_500M,
        ProximityBucket.WITHIN_500M,
        RiskLevel.MEDIUM,
        recommendations=("Proportionate landscape assessment",),
    ),
    BucketRule(
        AonbRule.WITHIN_1KM,
        ProximityBucket.WITHIN_1KM,
        RiskLevel.MEDIUM_LOW,
        recommendations=("Basic landscape context appraisal",),
    ),
    BucketRule(AonbRule.WITHIN_3KM, ProximityBucket.WITHIN_3KM, RiskLevel.LOW),
    BucketRule(AonbRule.WITHIN_5KM, ProximityBucket.WITHIN_5KM, RiskLevel.LOW),
)

RULE_SET = proximity_rule_set(
    FeatureType.AONB,
    AonbRule,
    TABLE,
    title="AONB",
    noun="AONB area",
)
