"""Green belt rules."""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class GreenBeltRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "green_belt_on_site"
    WITHIN_1KM = "green_belt_within_1km"


TABLE = (
    BucketRule(
        GreenBeltRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.MEDIUM_HIGH,
        recommendations=(
            "A Green Belt assessment is likely to be necessary.",
            "A robust Very Special Circumstances (VSC) case is likely to be required, "
            "supported by benefits such as biodiversity gain, socio-economic outcomes, "
            "PRoW improvements, and the temporary nature of the scheme.",
            "Further assessment will be required to ascertain whether an argument for "
            "Grey Belt is appropriate.",
        ),
    ),
    BucketRule(GreenBeltRule.WITHIN_1KM, ProximityBucket.WITHIN_1KM, RiskLevel.LOW),
)

RULE_SET = proximity_rule_set(
    FeatureType.GREEN_BELT,
    GreenBeltRule,
    TABLE,
    title="Green Belt",
    noun="Green Belt area",
)
