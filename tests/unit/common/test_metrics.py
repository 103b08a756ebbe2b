"""Unit tests for CloudWatch EMF counters."""

import logging

from site_risk.common.metrics import counter


def test_counter_defaults(emf_sink):
    """Test a counter records one Count with no dimensions."""
    counter("SiteAssessment")

    emf_sink.assert_called_once_with("SiteAssessment", 1, "Count", {})


def test_counter_with_dimensions(emf_sink):
    """Test keyword arguments become metric dimensions."""
    counter("DisciplineFailure", value=2, discipline="heritage")

    emf_sink.assert_called_once_with("DisciplineFailure", 2, "Count", {"discipline": "heritage"})


def test_counter_never_raises(emf_sink, caplog):
    """Test metric sink failures are logged and swallowed."""
    emf_sink.side_effect = ConnectionError("agent unreachable")

    with caplog.at_level(logging.ERROR, logger="site_risk.common.metrics"):
        counter("RulesetFailure")

    assert "agent unreachable" in caplog.text
