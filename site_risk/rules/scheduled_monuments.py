"""Scheduled monument rules.

Every proximity bucket is used, so the buckets cascade from on-site out to 5km.
"""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class ScheduledMonumentRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "scheduled_monuments_on_site"
    WITHIN_50M = "scheduled_monuments_within_50m"
    WITHIN_100M = "scheduled_monuments_within_100m"
    WITHIN_250M = "scheduled_monuments_within_250m"
    WITHIN_500M = "scheduled_monuments_within_500m"
    WITHIN_1KM = "scheduled_monuments_within_1km"
    WITHIN_3KM = "scheduled_monuments_within_3km"
    WITHIN_5KM = "scheduled_monuments_within_5km"


_HERITAGE_ASSESSMENT = (
    "A Heritage Statement or Heritage Impact Assessment will be required.",
    "Specialist heritage consultant input required at an early stage.",
)


def _row(
    rule_id: ScheduledMonumentRule,
    bucket: ProximityBucket,
    level: RiskLevel,
    recommendations: tuple[str, ...] = _HERITAGE_ASSESSMENT,
) -> BucketRule:
    return BucketRule(rule_id, bucket, level, recommendations=recommendations)


TABLE = (
    _row(ScheduledMonumentRule.ON_SITE, ProximityBucket.ON_SITE, RiskLevel.HIGH),
    _row(ScheduledMonumentRule.WITHIN_50M, ProximityBucket.WITHIN_50M, RiskLevel.HIGH),
    _row(ScheduledMonumentRule.WITHIN_100M, ProximityBucket.WITHIN_100M, RiskLevel.MEDIUM_HIGH),
    _row(ScheduledMonumentRule.WITHIN_250M, ProximityBucket.WITHIN_250M, RiskLevel.MEDIUM),
    _row(ScheduledMonumentRule.WITHIN_500M, ProximityBucket.WITHIN_500M, RiskLevel.MEDIUM),
    _row(ScheduledMonumentRule.WITHIN_1KM, ProximityBucket.WITHIN_1KM, RiskLevel.MEDIUM_LOW),
    _row(ScheduledMonumentRule.WITHIN_3KM, ProximityBucket.WITHIN_3KM, RiskLevel.MEDIUM_LOW, ()),
    _row(ScheduledMonumentRule.WITHIN_5KM, ProximityBucket.WITHIN_5KM, RiskLevel.LOW, ()),
)

RULE_SET = proximity_rule_set(
    FeatureType.SCHEDULED_MONUMENTS,
    ScheduledMonumentRule,
    TABLE,
    title="Scheduled Monuments",
    noun="Scheduled Monument",
)
