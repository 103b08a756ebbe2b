"""Listed building rules.

Listed buildings carry a measured distance instead of proximity flags, so the
rules classify on ``distance_m`` against fixed thresholds. Grade rules and the
any-grade rule deliberately overlap: a Grade I building 60m away triggers both
``grade_i_within_100m`` and ``any_grade_within_100m``.
"""

from collections.abc import Callable, Sequence
from enum import Enum

from site_risk.config import THRESHOLDS
from site_risk.models.domain import LISTED_BUILDING_GRADES, Feature, ListedBuilding, TriggeredRule
from site_risk.models.enums import FeatureType, RiskLevel
from site_risk.rules.base import RuleSet

NEAR_M = THRESHOLDS.LISTED_BUILDING_NEAR_M
SETTING_M = THRESHOLDS.LISTED_BUILDING_SETTING_M

_GRADE_II_OR_II_STAR = ("II*", "II")


class ListedBuildingRule(Enum):
    """Rule identifiers, most severe first."""

    GRADE_I_ON_SITE = "grade_i_on_site"
    GRADE_I_WITHIN_100M = "grade_i_within_100m"
    GRADE_I_WITHIN_500M = "grade_i_within_500m"
    GRADE_II_OR_II_STAR_ON_SITE = "grade_ii_or_ii_star_on_site"
    GRADE_II_OR_II_STAR_WITHIN_500M = "grade_ii_or_ii_star_within_500m"
    ANY_GRADE_WITHIN_100M = "any_grade_within_100m"


def _buildings(
    features: Sequence[Feature], predicate: Callable[[ListedBuilding], bool]
) -> list[ListedBuilding]:
    return [f for f in features if isinstance(f, ListedBuilding) and predicate(f)]


def grade_breakdown(
    buildings: Sequence[ListedBuilding], grades: Sequence[str] = LISTED_BUILDING_GRADES
) -> dict[str, int]:
    """Count buildings per listing grade, keeping zero counts for the given grades."""
    return {grade: sum(1 for b in buildings if b.grade == grade) for grade in grades}


def check_grade_i_on_site(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(features, lambda b: b.on_site and b.grade == "I")
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.GRADE_I_ON_SITE.value,
        level=RiskLevel.SHOWSTOPPER,
        rule="Grade I On-Site",
        findings=f"{len(buildings)} Grade I listed building(s) found on development site",
        impact="Development directly affects buildings of exceptional national importance",
        recommendations=[
            "This constitutes a showstopping designation",
            "Development on this site is not viable",
        ],
        areas=buildings,
    )


def check_grade_i_within_100m(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(
        features, lambda b: not b.on_site and b.grade == "I" and b.distance_m <= NEAR_M
    )
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.GRADE_I_WITHIN_100M.value,
        level=RiskLevel.HIGH,
        rule="Grade I Within 100m",
        findings=f"{len(buildings)} Grade I listed building(s) within 100m of site",
        impact="Development may significantly affect the setting of exceptional heritage assets",
        recommendations=[
            "Heritage Impact Assessment essential",
            "Early consultation with Historic England required",
            "Consider alternative site layouts that increase separation from the asset",
        ],
        areas=buildings,
    )


def check_grade_i_within_500m(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(
        features,
        lambda b: not b.on_site and b.grade == "I" and NEAR_M < b.distance_m <= SETTING_M,
    )
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.GRADE_I_WITHIN_500M.value,
        level=RiskLevel.HIGH,
        rule="Grade I Within 500m",
        findings=f"{len(buildings)} Grade I listed building(s) within 500m of site",
        impact="Development may affect wider setting of exceptional heritage assets",
        recommendations=[
            "Heritage assessment essential",
            "Setting assessment including key views to and from the asset",
        ],
        areas=buildings,
    )


def check_grade_ii_on_site(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(features, lambda b: b.on_site and b.grade in _GRADE_II_OR_II_STAR)
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.GRADE_II_OR_II_STAR_ON_SITE.value,
        level=RiskLevel.HIGH,
        rule="Grade II/II* On-Site",
        findings=f"{len(buildings)} Grade II or II* listed building(s) found on development site",
        impact="Development directly affects buildings of special architectural or historic interest",
        recommendations=[
            "Heritage Impact Assessment required",
            "Specialist heritage consultation recommended",
            "Listed building consent likely required for alterations",
            "Design must demonstrate minimal harm and public benefit",
            "Conservation officer consultation essential",
        ],
        areas=buildings,
        grade_breakdown=grade_breakdown(buildings, _GRADE_II_OR_II_STAR),
    )


def check_grade_ii_within_500m(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(
        features,
        lambda b: not b.on_site and b.grade in _GRADE_II_OR_II_STAR and b.distance_m <= SETTING_M,
    )
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.GRADE_II_OR_II_STAR_WITHIN_500M.value,
        level=RiskLevel.HIGH,
        rule="Grade II/II* Within 500m",
        findings=f"{len(buildings)} Grade II or II* listed building(s) within 500m of site",
        impact="Development may affect the setting of listed buildings",
        recommendations=[
            "Heritage Statement required to assess effects on setting",
            "Consultation with conservation officer recommended",
        ],
        areas=buildings,
        grade_breakdown=grade_breakdown(buildings, _GRADE_II_OR_II_STAR),
    )


def check_any_grade_within_100m(features: Sequence[Feature]) -> TriggeredRule | None:
    buildings = _buildings(features, lambda b: not b.on_site and b.distance_m <= NEAR_M)
    if not buildings:
        return None
    return TriggeredRule(
        id=ListedBuildingRule.ANY_GRADE_WITHIN_100M.value,
        level=RiskLevel.MEDIUM_HIGH,
        rule="Listed Buildings Within 100m",
        findings=f"{len(buildings)} listed building(s) within 100m of site",
        impact="Development likely to affect the immediate setting of listed buildings",
        recommendations=[
            "Heritage statement or Heritage Impact Assessment required",
            "Design and Access Statement must address heritage considerations",
            "Detailed site analysis and historical research",
            "Consultation with conservation officer recommended",
        ],
        areas=buildings,
        grade_breakdown=grade_breakdown(buildings),
    )


RULE_SET = RuleSet(
    FeatureType.LISTED_BUILDINGS,
    ListedBuildingRule,
    {
        ListedBuildingRule.GRADE_I_ON_SITE: check_grade_i_on_site,
        ListedBuildingRule.GRADE_I_WITHIN_100M: check_grade_i_within_100m,
        ListedBuildingRule.GRADE_I_WITHIN_500M: check_grade_i_within_500m,
        ListedBuildingRule.GRADE_II_OR_II_STAR_ON_SITE: check_grade_ii_on_site,
        ListedBuildingRule.GRADE_II_OR_II_STAR_WITHIN_500M: check_grade_ii_within_500m,
        ListedBuildingRule.ANY_GRADE_WITHIN_100M: check_any_grade_within_100m,
    },
)
