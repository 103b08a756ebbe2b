"""Agricultural land classification (ALC) rules.

Coverage is summed per grade across all areas of that grade, then mapped
through the grade's coverage bands. Below the minimum coverage nothing
triggers. Grades 4 and 5 only trigger when no Grade 1-3 land reaches the
minimum coverage.
"""

from collections.abc import Sequence
from enum import Enum

from site_risk.config import THRESHOLDS
from site_risk.models.domain import AgriculturalLandArea, Feature, TriggeredRule
from site_risk.models.enums import FeatureType, RiskLevel
from site_risk.rules.base import RuleFunction, RuleSet, pluralise

MIN_COVERAGE_PCT = THRESHOLDS.AG_LAND_MIN_COVERAGE_PCT

_BEST_AND_MOST_VERSATILE = (1, 2, 3)

_JUSTIFICATION = (
    "Additional supporting material such as a Site Justification Document, farm "
    "diversification/business case, and policy justification will likely be required"
)
_NATURAL_ENGLAND = "Early engagement with Natural England recommended for Grade 1 and 2 land"


class AgLandRule(Enum):
    """Rule identifiers, most restrictive grade first."""

    GRADE_1 = "grade_1_on_site"
    GRADE_2 = "grade_2_on_site"
    GRADE_3 = "grade_3_on_site"
    GRADE_4 = "grade_4_on_site"
    GRADE_5 = "grade_5_on_site"


# Coverage bands per grade: (inclusive lower bound %, level), highest band first
COVERAGE_BANDS: dict[int, tuple[tuple[float, RiskLevel], ...]] = {
    1: (
        (THRESHOLDS.AG_LAND_GRADE_1_SHOWSTOPPER_PCT, RiskLevel.SHOWSTOPPER),
        (MIN_COVERAGE_PCT, RiskLevel.EXTREMELY_HIGH),
    ),
    2: (
        (THRESHOLDS.AG_LAND_GRADE_2_HIGH_PCT, RiskLevel.HIGH),
        (THRESHOLDS.AG_LAND_GRADE_2_MEDIUM_HIGH_PCT, RiskLevel.MEDIUM_HIGH),
        (MIN_COVERAGE_PCT, RiskLevel.MEDIUM),
    ),
    3: ((MIN_COVERAGE_PCT, RiskLevel.MEDIUM),),
    4: ((MIN_COVERAGE_PCT, RiskLevel.LOW),),
    5: ((MIN_COVERAGE_PCT, RiskLevel.LOW),),
}

RECOMMENDATIONS: dict[int, tuple[str, ...]] = {
    1: (
        "Presence of Grade 1 land constitutes a very high risk",
        "Comprehensive agricultural land assessment essential",
        _JUSTIFICATION,
        _NATURAL_ENGLAND,
    ),
    2: (
        "Presence of Grade 2 land constitutes high risk. Whilst not necessarily a "
        "showstopper, strong justification will be needed for development on BMV land",
        _NATURAL_ENGLAND,
        _JUSTIFICATION,
    ),
    3: (
        "Whilst not necessarily a showstopper, strong justification will be needed for "
        "development on BMV land",
        _JUSTIFICATION,
    ),
    4: (
        "Poor quality agricultural land - limited agricultural value",
        "Minimal agricultural land constraints for development",
    ),
    5: (
        "Very poor quality agricultural land - very limited agricultural value",
        "No significant agricultural land constraints for development",
    ),
}


def areas_of_grade(features: Sequence[Feature], grade: int) -> list[AgriculturalLandArea]:
    return [
        f for f in features if isinstance(f, AgriculturalLandArea) and f.grade_number == grade
    ]


def total_coverage(areas: Sequence[AgriculturalLandArea]) -> float:
    return sum(area.percentage_coverage for area in areas)


def coverage_level(grade: int, coverage: float) -> RiskLevel | None:
    """Map summed coverage for a grade to a level, or None below the minimum."""
    for lower_bound, level in COVERAGE_BANDS[grade]:
        if coverage >= lower_bound:
            return level
    return None


def has_significant_bmv_land(features: Sequence[Feature]) -> bool:
    """Whether any Grade 1-3 land reaches the minimum coverage on its own."""
    return any(
        total_coverage(areas_of_grade(features, grade)) >= MIN_COVERAGE_PCT
        for grade in _BEST_AND_MOST_VERSATILE
    )


def grade_rule(rule_id: AgLandRule, grade: int) -> RuleFunction:
    """Build the rule function for one ALC grade."""

    def evaluate(features: Sequence[Feature]) -> TriggeredRule | None:
        if grade not in _BEST_AND_MOST_VERSATILE and has_significant_bmv_land(features):
            return None
        areas = areas_of_grade(features, grade)
        coverage = total_coverage(areas)
        level = coverage_level(grade, coverage)
        if level is None:
            return None
        return TriggeredRule(
            id=rule_id.value,
            level=level,
            rule=f"Grade {grade} Agricultural Land On-Site",
            findings=(
                f"{coverage:.1f}% of site consists of Grade {grade} agricultural land "
                f"({pluralise(len(areas), 'area')})"
            ),
            recommendations=list(RECOMMENDATIONS[grade]),
            areas=areas,
        )

    return evaluate


RULE_SET = RuleSet(
    FeatureType.AG_LAND,
    AgLandRule,
    {
        AgLandRule.GRADE_1: grade_rule(AgLandRule.GRADE_1, 1),
        AgLandRule.GRADE_2: grade_rule(AgLandRule.GRADE_2, 2),
        AgLandRule.GRADE_3: grade_rule(AgLandRule.GRADE_3, 3),
        AgLandRule.GRADE_4: grade_rule(AgLandRule.GRADE_4, 4),
        AgLandRule.GRADE_5: grade_rule(AgLandRule.GRADE_5, 5),
    },
)
