"""Rule set building blocks.

A rule set is the ordered collection of rule functions for one feature type.
The order is declared by an ``Enum`` of rule identifiers (most severe first),
and every matching rule fires, not just the first one.

Most feature types are classified purely by proximity flags. For those,
``proximity_rule_set`` builds one rule function per bucket from a declarative
table, so a feature lands in exactly one bucket of the rule set.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from site_risk.models.domain import Feature, ProximityFeature, TriggeredRule
from site_risk.models.enums import FeatureType, ProximityBucket, RiskLevel

logger = logging.getLogger(__name__)


RuleFunction = Callable[[Sequence[Feature]], TriggeredRule | None]


def pluralise(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"1 area"`` / ``"3 areas"`` style count phrases."""
    word = singular if count == 1 else (plural or f"{singular}s")
    return f"{count} {word}"


def bucket_title(bucket: ProximityBucket) -> str:
    """Title suffix for a bucket, e.g. ``"On-Site"`` or ``"Within 250m"``."""
    if bucket is ProximityBucket.ON_SITE:
        return "On-Site"
    return f"Within {bucket.label}"


def bucket_location(bucket: ProximityBucket) -> str:
    """Findings suffix for a bucket, e.g. ``"intersecting site"``."""
    if bucket is ProximityBucket.ON_SITE:
        return "intersecting site"
    return f"within {bucket.label} of site"


class RuleSet:
    """Ordered rule functions for one feature type.

    Args:
        feature_type: Payload key the rule set reads
        order: Enum of rule identifiers, declared most severe first
        functions: Rule function for every member of ``order``

    Raises:
        ValueError: If ``functions`` does not cover ``order`` exactly
    """

    def __init__(
        self,
        feature_type: FeatureType,
        order: type[Enum],
        functions: Mapping[Enum, RuleFunction],
    ):
        missing = [rule_id.value for rule_id in order if rule_id not in functions]
        extra = [rule_id for rule_id in functions if rule_id not in set(order)]
        if missing or extra:
            msg = (
                f"Rule functions for {feature_type.value} do not match declared order: "
                f"missing={missing}, unexpected={extra}"
            )
            raise ValueError(msg)

        self.feature_type = feature_type
        self.order = order
        self.functions = dict(functions)

    @property
    def rule_ids(self) -> list[str]:
        return [rule_id.value for rule_id in self.order]

    def rules_processed(self, features: Sequence[Feature]) -> int:
        """Number of rule evaluations reported in assessment metadata."""
        return len(self.order)

    def evaluate(self, features: Sequence[Feature] | None) -> list[TriggeredRule]:
        """Run every rule function in declared order.

        Args:
            features: Features of this rule set's type; None is treated as empty

        Returns:
            Triggered rules, most severe rule function first
        """
        features = list(features or [])
        triggered = []
        for rule_id in self.order:
            result = self.functions[rule_id](features)
            if result is not None:
                triggered.append(result)

        logger.debug(
            f"{self.feature_type.value}: {len(triggered)}/{len(self.order)} rules triggered "
            f"from {len(features)} feature(s)"
        )
        return triggered


class PerFeatureRuleSet(RuleSet):
    """Rule set that emits one triggered rule per qualifying feature.

    Each rule function is called with a single feature; the first rule
    function (in declared order) that matches a feature wins for that
    feature. Output follows input order. When two features produce the same
    rule id, the later one is suffixed with its 1-based input position so ids
    stay unique within the rule set's output.
    """

    def rules_processed(self, features: Sequence[Feature]) -> int:
        return len(features)

    def evaluate(self, features: Sequence[Feature] | None) -> list[TriggeredRule]:
        features = list(features or [])
        triggered = []
        seen_ids: set[str] = set()
        for position, feature in enumerate(features, start=1):
            for rule_id in self.order:
                result = self.functions[rule_id]([feature])
                if result is None:
                    continue
                if result.id in seen_ids:
                    result = result.model_copy(update={"id": f"{result.id}_{position}"})
                seen_ids.add(result.id)
                triggered.append(result)
                break

        logger.debug(
            f"{self.feature_type.value}: {len(triggered)} of {len(features)} feature(s) triggered"
        )
        return triggered


@dataclass(frozen=True)
class BucketRule:
    """Declarative row of a proximity rule table.

    Attributes:
        rule_id: Identifier member from the rule set's order enum
        bucket: The single proximity bucket this rule matches
        level: Severity when triggered
        recommendations: Recommendation text attached to the triggered rule
        impact: Optional planning-impact narrative
    """

    rule_id: Enum
    bucket: ProximityBucket
    level: RiskLevel
    recommendations: tuple[str, ...] = ()
    impact: str | None = None


def proximity_rule(
    rule: BucketRule,
    buckets: Sequence[ProximityBucket],
    title: str,
    noun: str,
    noun_plural: str | None = None,
) -> RuleFunction:
    """Build a rule function matching features whose nearest bucket is ``rule.bucket``.

    Args:
        rule: Table row describing the rule
        buckets: The rule set's bucket list, nearest first
        title: Feature label used in the rule title (``"Ramsar Site"``)
        noun: Singular noun used in findings (``"Ramsar site"``)
        noun_plural: Plural noun when not simply ``noun + "s"``
    """
    if rule.bucket not in buckets:
        msg = f"Bucket {rule.bucket.value} is not part of the rule set's buckets"
        raise ValueError(msg)

    def evaluate(features: Sequence[Feature]) -> TriggeredRule | None:
        matched = [
            feature
            for feature in features
            if isinstance(feature, ProximityFeature)
            and feature.nearest_bucket(buckets) is rule.bucket
        ]
        if not matched:
            return None
        return TriggeredRule(
            id=rule.rule_id.value,
            level=rule.level,
            rule=f"{title} {bucket_title(rule.bucket)}",
            findings=f"{pluralise(len(matched), noun, noun_plural)} {bucket_location(rule.bucket)}",
            impact=rule.impact,
            recommendations=list(rule.recommendations),
            areas=matched,
        )

    return evaluate


def proximity_rule_set(
    feature_type: FeatureType,
    order: type[Enum],
    table: Sequence[BucketRule],
    title: str,
    noun: str,
    noun_plural: str | None = None,
) -> RuleSet:
    """Build a rule set from a proximity table.

    The bucket list is the set of buckets named in ``table``, nearest first,
    so flags the table does not mention never affect classification.
    """
    buckets = [bucket for bucket in ProximityBucket if any(r.bucket is bucket for r in table)]
    functions = {
        rule.rule_id: proximity_rule(rule, buckets, title, noun, noun_plural) for rule in table
    }
    return RuleSet(feature_type, order, functions)
