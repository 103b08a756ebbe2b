"""Renewable energy development rules.

Each development is classified by its nearest proximity bucket, grouped into
distance bands, and cross-tabulated against its status category. One
triggered rule is emitted per qualifying development.
"""

import re
from collections.abc import Sequence
from enum import Enum

from site_risk.models.domain import Feature, RenewableDevelopment, TriggeredRule
from site_risk.models.enums import DevelopmentStatus, FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import PerFeatureRuleSet, RuleFunction


class DistanceBand(Enum):
    NEAR = "near"
    MID = "mid"
    FAR = "far"
    FARTHEST = "farthest"


BANDS: dict[ProximityBucket, DistanceBand] = {
    ProximityBucket.ON_SITE: DistanceBand.NEAR,
    ProximityBucket.WITHIN_50M: DistanceBand.NEAR,
    ProximityBucket.WITHIN_100M: DistanceBand.NEAR,
    ProximityBucket.WITHIN_250M: DistanceBand.NEAR,
    ProximityBucket.WITHIN_500M: DistanceBand.MID,
    ProximityBucket.WITHIN_1KM: DistanceBand.MID,
    ProximityBucket.WITHIN_3KM: DistanceBand.FAR,
    ProximityBucket.WITHIN_5KM: DistanceBand.FARTHEST,
}


class RenewablesRule(Enum):
    """Rule identifiers per status category, most severe category first."""

    COMMITTED = "renewables_committed"
    ACTIVE = "renewables_active"
    REFUSED = "renewables_refused"


LEVELS: dict[DevelopmentStatus, dict[DistanceBand, RiskLevel]] = {
    DevelopmentStatus.COMMITTED: {
        DistanceBand.NEAR: RiskLevel.SHOWSTOPPER,
        DistanceBand.MID: RiskLevel.EXTREMELY_HIGH,
        DistanceBand.FAR: RiskLevel.MEDIUM_HIGH,
        DistanceBand.FARTHEST: RiskLevel.MEDIUM_LOW,
    },
    DevelopmentStatus.ACTIVE: {
        DistanceBand.NEAR: RiskLevel.EXTREMELY_HIGH,
        DistanceBand.MID: RiskLevel.HIGH,
        DistanceBand.FAR: RiskLevel.MEDIUM,
        DistanceBand.FARTHEST: RiskLevel.MEDIUM_LOW,
    },
    DevelopmentStatus.REFUSED: dict.fromkeys(DistanceBand, RiskLevel.LOW),
}

RECOMMENDATIONS: dict[DevelopmentStatus, tuple[str, ...]] = {
    DevelopmentStatus.REFUSED: (
        "Review the decision notice and reasons for refusal",
        "Consider how reasons may indicate local policy stance",
        "Monitor for any resubmissions or appeals",
    ),
    DevelopmentStatus.ACTIVE: (
        "Monitor application progress and committee dates",
        "Engage with the LPA regarding cumulative and visual impacts",
        "Prepare representations if appropriate",
        "Assess construction traffic and grid connection implications",
    ),
    DevelopmentStatus.COMMITTED: (
        "Account for operational/committed development in cumulative effects",
        "Mitigation options likely limited due to committed status",
        "Consider landscape and infrastructure presence in assessments",
    ),
}

IMPACTS: dict[DevelopmentStatus, str] = {
    DevelopmentStatus.REFUSED: (
        "A previous refusal may indicate the local planning authority's likely stance "
        "on similar developments"
    ),
    DevelopmentStatus.ACTIVE: (
        "The development may proceed and could add to landscape change, infrastructure "
        "requirements and cumulative development pressure"
    ),
    DevelopmentStatus.COMMITTED: (
        "The development is committed and will contribute to cumulative landscape and "
        "infrastructure effects"
    ),
}


def rule_id_for(development: RenewableDevelopment) -> str:
    """Per-development rule id, ``renewables_<slug>`` from the id or site name.

    Letters outside ASCII are kept; other runs of punctuation become ``_``.
    """
    key = development.id or development.site_name or "unidentified"
    return "renewables_" + re.sub(r"\W+", "_", key.lower()).strip("_")


def _format_number(value: float | None) -> str:
    if value is None:
        return "Unknown"
    return f"{value:g}"


def _title(development: RenewableDevelopment, status: DevelopmentStatus, where: str) -> str:
    technology = development.technology_type or "Solar"
    if status is DevelopmentStatus.REFUSED:
        return f"{technology} Development Previously Refused ({where})"
    if status is DevelopmentStatus.ACTIVE:
        return f"Active {technology} Development Application ({where})"
    return f"{development.development_status_short} {technology} Development ({where})"


def _findings(development: RenewableDevelopment, bucket: ProximityBucket) -> str:
    technology = (development.technology_type or "Solar").lower()
    if bucket is ProximityBucket.ON_SITE:
        location = "on-site"
    elif development.distance_m is None:
        location = "at an unknown distance"
    else:
        location = f"at {_format_number(development.distance_m)}m"
        if development.direction:
            location = f"{location} {development.direction}"
    return (
        f"Large-scale {technology} development "
        f"({_format_number(development.installed_capacity_mw)} MW) {location} "
        f"({bucket.label}). Status: {development.development_status_short}."
    )


def status_rule(status: DevelopmentStatus) -> RuleFunction:
    """Build the rule function for one status category.

    The function is called with a single development and fires when the
    development belongs to ``status`` and lies within 5km.
    """

    def evaluate(features: Sequence[Feature]) -> TriggeredRule | None:
        (development,) = features
        if not isinstance(development, RenewableDevelopment):
            return None
        if DevelopmentStatus.from_status_text(development.development_status_short) is not status:
            return None
        bucket = development.nearest_bucket()
        if bucket is None:
            return None
        return TriggeredRule(
            id=rule_id_for(development),
            level=LEVELS[status][BANDS[bucket]],
            rule=_title(development, status, bucket.label),
            findings=_findings(development, bucket),
            impact=IMPACTS[status],
            recommendations=list(RECOMMENDATIONS[status]),
            areas=[development],
        )

    return evaluate


RULE_SET = PerFeatureRuleSet(
    FeatureType.RENEWABLES,
    RenewablesRule,
    {
        RenewablesRule.COMMITTED: status_rule(DevelopmentStatus.COMMITTED),
        RenewablesRule.ACTIVE: status_rule(DevelopmentStatus.ACTIVE),
        RenewablesRule.REFUSED: status_rule(DevelopmentStatus.REFUSED),
    },
)
