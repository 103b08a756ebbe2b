"""Unit tests for green belt rules."""

from site_risk.models import RiskLevel
from site_risk.rules.green_belt import RULE_SET


def test_on_site_green_belt(proximity_feature):
    """Test green belt land on site needs a very special circumstances case."""
    rules = RULE_SET.evaluate([proximity_feature("green_belt", on_site=True, within_1km=True)])

    assert [rule.id for rule in rules] == ["green_belt_on_site"]
    assert rules[0].level is RiskLevel.MEDIUM_HIGH
    assert rules[0].findings == "1 Green Belt area intersecting site"
    assert len(rules[0].recommendations) == 3


def test_green_belt_nearby(proximity_feature):
    """Test green belt within 1km is low risk without recommendations."""
    rules = RULE_SET.evaluate([proximity_feature("green_belt", within_250m=True, within_1km=True)])

    assert [rule.id for rule in rules] == ["green_belt_within_1km"]
    assert rules[0].level is RiskLevel.LOW
    assert rules[0].recommendations == []


def test_green_belt_beyond_1km(proximity_feature):
    """Test green belt only flagged at 3km or 5km triggers nothing."""
    assert RULE_SET.evaluate([proximity_feature("green_belt", within_3km=True)]) == []
