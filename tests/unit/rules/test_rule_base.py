"""Unit tests for rule set building blocks and cross-cutting rule set properties."""

import itertools
from enum import Enum

import pytest

from site_risk.models import FeatureType, ProximityBucket, ProximityFeature, RiskLevel
from site_risk.rules import RULE_SETS
from site_risk.rules.base import (
    BucketRule,
    RuleSet,
    bucket_location,
    bucket_title,
    pluralise,
    proximity_rule,
)

PROXIMITY_TYPES = [
    FeatureType.CONSERVATION_AREAS,
    FeatureType.SCHEDULED_MONUMENTS,
    FeatureType.AONB,
    FeatureType.GREEN_BELT,
    FeatureType.RAMSAR,
    FeatureType.OS_PRIORITY_PONDS,
    FeatureType.GCN,
]


class _Rule(Enum):
    FIRST = "first"
    SECOND = "second"


def _all_flag_combinations(feature_type: FeatureType):
    flags = [bucket.value for bucket in ProximityBucket]
    for values in itertools.product([False, True], repeat=len(flags)):
        yield ProximityFeature(feature_type=feature_type.value, **dict(zip(flags, values)))


def test_every_feature_type_has_a_rule_set():
    """Test the registry covers every feature type with matching keys."""
    assert set(RULE_SETS) == set(FeatureType)
    for feature_type, rule_set in RULE_SETS.items():
        assert rule_set.feature_type is feature_type


def test_rule_ids_are_unique():
    """Test rule identifiers are unique across all rule sets."""
    ids = [rule_id for rule_set in RULE_SETS.values() for rule_id in rule_set.rule_ids]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("feature_type", PROXIMITY_TYPES, ids=lambda ft: ft.value)
def test_proximity_buckets_are_mutually_exclusive(feature_type):
    """Test no single feature fires two bucket rules of the same rule set."""
    rule_set = RULE_SETS[feature_type]
    for feature in _all_flag_combinations(feature_type):
        assert len(rule_set.evaluate([feature])) <= 1


@pytest.mark.parametrize("feature_type", PROXIMITY_TYPES, ids=lambda ft: ft.value)
def test_proximity_rule_order_is_most_severe_first(feature_type):
    """Test declared rule order never places a less severe rule before a more severe one."""
    rule_set = RULE_SETS[feature_type]
    features = list(_all_flag_combinations(feature_type))
    levels = [rule.level.rank for rule in rule_set.evaluate(features)]
    assert levels == sorted(levels)
    assert len(levels) == len(rule_set.order)


@pytest.mark.parametrize("feature_type", list(FeatureType), ids=lambda ft: ft.value)
def test_absent_collection_triggers_nothing(feature_type):
    """Test None and empty inputs are treated as zero matches."""
    assert RULE_SETS[feature_type].evaluate(None) == []
    assert RULE_SETS[feature_type].evaluate([]) == []


def test_evaluation_is_idempotent():
    """Test evaluating the same features twice yields equal rules."""
    features = list(_all_flag_combinations(FeatureType.RAMSAR))
    rule_set = RULE_SETS[FeatureType.RAMSAR]
    assert rule_set.evaluate(features) == rule_set.evaluate(features)


def test_rule_set_requires_function_per_declared_rule():
    """Test a rule set rejects a function table that does not match its order enum."""
    with pytest.raises(ValueError, match="missing=\\['second'\\]"):
        RuleSet(FeatureType.AONB, _Rule, {_Rule.FIRST: lambda features: None})


def test_proximity_rule_rejects_bucket_outside_rule_set():
    """Test a table row cannot name a bucket the rule set does not classify into."""
    row = BucketRule(_Rule.FIRST, ProximityBucket.WITHIN_3KM, RiskLevel.LOW)
    with pytest.raises(ValueError):
        proximity_rule(row, [ProximityBucket.ON_SITE], title="Thing", noun="thing")


def test_text_helpers():
    """Test count phrases and bucket wording."""
    assert pluralise(1, "area") == "1 area"
    assert pluralise(3, "area") == "3 areas"
    assert pluralise(2, "record", "records held") == "2 records held"
    assert bucket_title(ProximityBucket.ON_SITE) == "On-Site"
    assert bucket_title(ProximityBucket.WITHIN_1KM) == "Within 1km"
    assert bucket_location(ProximityBucket.ON_SITE) == "intersecting site"
    assert bucket_location(ProximityBucket.WITHIN_250M) == "within 250m of site"
