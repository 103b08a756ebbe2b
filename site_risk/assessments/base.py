"""Shared discipline aggregation.

A discipline assessment runs its rule sets in a fixed order, concatenates the
triggered rules, applies the showstopper override, sorts by severity and picks
the discipline's default recommendation text.

Showstopper override policy: DROP. When any rule is a Showstopper, every
non-Showstopper rule is removed from the output and the number removed is
reported in ``metadata.rules_suppressed``. The same policy applies to every
discipline.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from site_risk.common.metrics import counter
from site_risk.config import DEFAULT_RULES_CONFIG, DisciplineRecommendations, RulesConfig
from site_risk.models.domain import AssessmentMetadata, DisciplineAssessment, TriggeredRule
from site_risk.models.enums import Discipline, FeatureType, RiskLevel
from site_risk.rules import RULE_SETS
from site_risk.validation.features import ParsedAnalysis, parse_analysis

logger = logging.getLogger(__name__)


def apply_showstopper_override(
    rules: Sequence[TriggeredRule],
) -> tuple[list[TriggeredRule], int]:
    """Drop every non-Showstopper rule when at least one Showstopper is present.

    Args:
        rules: Triggered rules in rule-set order

    Returns:
        Tuple of (remaining rules, number of rules suppressed)
    """
    showstoppers = [rule for rule in rules if rule.level is RiskLevel.SHOWSTOPPER]
    if not showstoppers:
        return list(rules), 0
    return showstoppers, len(rules) - len(showstoppers)


def sort_by_severity(rules: Sequence[TriggeredRule]) -> list[TriggeredRule]:
    """Most severe first; rules of equal severity keep their rule-set order."""
    return sorted(rules, key=lambda rule: rule.level.rank)


def select_recommendations(
    rules: Sequence[TriggeredRule], defaults: DisciplineRecommendations
) -> tuple[list[str], list[str]]:
    """Choose discipline-level default recommendations.

    Triggered defaults are attached only when rules fired and none of them is
    a Showstopper; no-rules defaults only when nothing fired.

    Returns:
        Tuple of (triggered recommendations, no-rules recommendations)
    """
    if not rules:
        return [], list(defaults.no_rules)
    if any(rule.level is RiskLevel.SHOWSTOPPER for rule in rules):
        return [], []
    return list(defaults.triggered), []


class RuleAssessment:
    """Base class for discipline assessments.

    Subclasses declare the discipline, its rule sets (in run order) and the
    version tag of its rule catalogue.

    Pattern:
    - Constructor: __init__(analysis, config)
    - Run method: run() -> DisciplineAssessment
    """

    discipline: ClassVar[Discipline]
    feature_types: ClassVar[tuple[FeatureType, ...]]
    rules_version: ClassVar[str]

    def __init__(
        self,
        analysis: ParsedAnalysis | Mapping[str, Any] | None,
        config: RulesConfig = DEFAULT_RULES_CONFIG,
    ):
        """Initialise the assessment.

        Args:
            analysis: Parsed analysis, or the raw ``{feature_type: [records]}`` payload
            config: Rules configuration (recommendation overrides)
        """
        if not isinstance(analysis, ParsedAnalysis):
            analysis = parse_analysis(analysis)
        self.analysis = analysis
        self.config = config

    def run(self) -> DisciplineAssessment:
        """Evaluate the discipline's rule sets and aggregate the result.

        A rule set that raises is logged, counted and listed in
        ``metadata.degraded_feature_types``; the remaining rule sets still run.

        Returns:
            The discipline assessment
        """
        logger.info(f"Running {self.discipline.value} assessment")

        triggered: list[TriggeredRule] = []
        degraded: list[str] = []
        processed = 0

        for feature_type in self.feature_types:
            rule_set = RULE_SETS[feature_type]
            features = self.analysis.get(feature_type)
            try:
                results = rule_set.evaluate(features)
            except Exception:
                logger.exception(
                    f"{feature_type.value} rules failed in {self.discipline.value} assessment; "
                    "treating as not triggered"
                )
                counter("RulesetFailure")
                degraded.append(feature_type.value)
                continue
            processed += rule_set.rules_processed(features)
            triggered.extend(results)

        rules, suppressed = apply_showstopper_override(triggered)
        if suppressed:
            logger.info(
                f"Showstopper present in {self.discipline.value}: "
                f"suppressed {suppressed} lower-severity rule(s)"
            )
        rules = sort_by_severity(rules)

        defaults = self.config.recommendations()[self.discipline]
        triggered_recs, no_rules_recs = select_recommendations(rules, defaults)

        assessment = DisciplineAssessment(
            discipline=self.discipline,
            rules=rules,
            overall_risk=rules[0].level if rules else None,
            features={ft.value: self.analysis.get(ft) for ft in self.feature_types},
            default_triggered_recommendations=triggered_recs,
            default_no_rules_recommendations=no_rules_recs,
            metadata=AssessmentMetadata(
                total_rules_processed=processed,
                rules_triggered=len(rules),
                rules_suppressed=suppressed,
                rules_version=self.rules_version,
                degraded_feature_types=degraded,
                malformed_features=len(self.analysis.errors_for(list(self.feature_types))),
            ),
        )

        overall = assessment.overall_risk.value if assessment.overall_risk else "none"
        logger.info(
            f"{self.discipline.value} assessment complete: {len(rules)} rule(s), "
            f"overall risk {overall}"
        )
        return assessment
