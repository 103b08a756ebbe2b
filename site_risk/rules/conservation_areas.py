"""Conservation area rules."""

from enum import Enum

from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel
from site_risk.rules.base import BucketRule, proximity_rule_set


class ConservationAreaRule(Enum):
    """Rule identifiers, most severe first."""

    ON_SITE = "conservation_area_on_site"
    WITHIN_250M = "conservation_area_within_250m"
    WITHIN_1KM = "conservation_area_within_1km"


_SETTING_RECOMMENDATIONS = (
    "Heritage Statement required to assess effects on the setting of the Conservation Area",
    "Consider views into and out of the Conservation Area when developing the layout",
)

TABLE = (
    BucketRule(
        ConservationAreaRule.ON_SITE,
        ProximityBucket.ON_SITE,
        RiskLevel.EXTREMELY_HIGH,
        recommendations=(
            "Heritage Statement essential",
            "Specialist heritage consultant input required at an early stage",
            "Careful consideration of site layout required to minimise adverse impact "
            "on the Conservation Area",
        ),
        impact=(
            "Development within conservation area requires preservation or enhancement "
            "of character and appearance"
        ),
    ),
    BucketRule(
        ConservationAreaRule.WITHIN_250M,
        ProximityBucket.WITHIN_250M,
        RiskLevel.HIGH,
        recommendations=_SETTING_RECOMMENDATIONS,
        impact="Development may affect the setting of the Conservation Area",
    ),
    BucketRule(
        ConservationAreaRule.WITHIN_1KM,
        ProximityBucket.WITHIN_1KM,
        RiskLevel.MEDIUM_HIGH,
        recommendations=_SETTING_RECOMMENDATIONS[:1],
    ),
)

RULE_SET = proximity_rule_set(
    FeatureType.CONSERVATION_AREAS,
    ConservationAreaRule,
    TABLE,
    title="Conservation Area",
    noun="conservation area",
)
