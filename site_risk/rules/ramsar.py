"""Ramsar site (wetlands of international importance) rules."""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class RamsarRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "ramsar_on_site"
    WITHIN_50M = "ramsar_within_50m"
    WITHIN_100M = "ramsar_within_100m"
    WITHIN_250M = "ramsar_within_250m"
    WITHIN_500M = "ramsar_within_500m"
    WITHIN_1KM = "ramsar_within_1km"
    WITHIN_3KM = "ramsar_within_3km"
    WITHIN_5KM = "ramsar_within_5km"


_ASSESS_EFFECTS = ("Likely effects on the Ramsar site must be assessed",)
_BUFFERS = (
    *_ASSESS_EFFECTS,
    "Appropriate buffer zones and mitigation measures may be required",
)

TABLE = (
    BucketRule(
        RamsarRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.SHOWSTOPPER,
        recommendations=(
            "Development within Ramsar sites is extremely unlikely to be acceptable",
            "Immediate consultation with Natural England required",
            "Alternative site locations should be considered",
        ),
    ),
    BucketRule(
        RamsarRule.WITHIN_50M, ProximityBucket.WITHIN_50M, RiskLevel.EXTREMELY_HIGH, _ASSESS_EFFECTS
    ),
    BucketRule(
        RamsarRule.WITHIN_100M,
        ProximityBucket.WITHIN_100M,
        RiskLevel.EXTREMELY_HIGH,
        _ASSESS_EFFECTS,
    ),
    BucketRule(RamsarRule.WITHIN_250M, ProximityBucket.WITHIN_250M, RiskLevel.HIGH, _ASSESS_EFFECTS),
    BucketRule(RamsarRule.WITHIN_500M, ProximityBucket.WITHIN_500M, RiskLevel.MEDIUM_HIGH, _BUFFERS),
    BucketRule(RamsarRule.WITHIN_1KM, ProximityBucket.WITHIN_1KM, RiskLevel.MEDIUM, _BUFFERS),
    BucketRule(
        RamsarRule.WITHIN_3KM,
        ProximityBucket.WITHIN_3KM,
        RiskLevel.MEDIUM_LOW,
        ("Ramsar site within 3km - effects of development may need to be assessed",),
    ),
    BucketRule(RamsarRule.WITHIN_5KM, ProximityBucket.WITHIN_5KM, RiskLevel.LOW),
)

RULE_SET = proximity_rule_set(
    FeatureType.RAMSAR,
    RamsarRule,
    TABLE,
    title="Ramsar Site",
    noun="Ramsar site",
)
