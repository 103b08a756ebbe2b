"""Unit tests for the site assessment orchestrator."""

import pytest

from site_risk.config import RulesConfig
from site_risk.models import (
    AssessmentMetadata,
    Discipline,
    DisciplineAssessment,
    RiskLevel,
)
from site_risk.orchestrator import SiteAssessor, assess_site
from site_risk.risk import risk_summary
from site_risk.runner.runner import run_assessment


def discipline_result(discipline, overall_risk):
    return DisciplineAssessment(
        discipline=discipline,
        overall_risk=overall_risk,
        metadata=AssessmentMetadata(
            total_rules_processed=0, rules_triggered=0, rules_version="test"
        ),
    )


@pytest.fixture
def site_payload(proximity_record):
    return {
        "listed_buildings": [{"grade": "II", "distance_m": 250}],
        "aonb": [proximity_record(on_site=True)],
        "gcn": [proximity_record(within_250m=True)],
        "ag_land": [{"grade": "Grade 4", "percentage_coverage": 90}],
        "renewables": [],
    }


def sequential():
    return RulesConfig(parallel_disciplines=False, _env_file=None)


def parallel():
    return RulesConfig(parallel_disciplines=True, _env_file=None)


def test_overall_risk_is_most_severe_discipline():
    """Test heritage High and landscape Extremely High give Extremely High overall."""
    site = assess_site(
        [
            discipline_result(Discipline.HERITAGE, RiskLevel.HIGH),
            discipline_result(Discipline.LANDSCAPE, RiskLevel.EXTREMELY_HIGH),
        ]
    )

    assert site.overall_risk is RiskLevel.EXTREMELY_HIGH
    assert site.summary == risk_summary(RiskLevel.EXTREMELY_HIGH)
    assert [entry.name for entry in site.risk_by_discipline] == ["Heritage", "Landscape"]


def test_disciplines_without_risk_left_out_of_summary():
    """Test disciplines with no triggered rules are not listed in risk-by-discipline."""
    site = assess_site(
        [
            discipline_result(Discipline.HERITAGE, None),
            discipline_result(Discipline.RENEWABLES, RiskLevel.LOW),
        ]
    )

    assert site.overall_risk is RiskLevel.LOW
    assert [entry.discipline for entry in site.risk_by_discipline] == [Discipline.RENEWABLES]
    assert len(site.disciplines) == 2


def test_no_risk_anywhere():
    """Test a site with no triggered rules has no overall risk."""
    site = assess_site([discipline_result(Discipline.ECOLOGY, None)])

    assert site.overall_risk is None
    assert site.summary == risk_summary(None)


def test_assess_all_disciplines(site_payload, emf_sink):
    """Test every discipline is assessed in report order."""
    site = SiteAssessor(sequential()).assess(site_payload)

    assert [d.discipline for d in site.disciplines] == list(Discipline)
    assert site.overall_risk is RiskLevel.EXTREMELY_HIGH
    assert site.failed_disciplines == []
    emf_sink.assert_called_once_with("SiteAssessment", 1, "Count", {})


def test_parallel_matches_sequential(site_payload):
    """Test running disciplines concurrently gives the same assessment."""
    assert SiteAssessor(parallel()).assess(site_payload) == SiteAssessor(sequential()).assess(
        site_payload
    )


def test_discipline_filter_keeps_report_order(site_payload):
    """Test requested disciplines run in report order and unknown names are ignored."""
    site = SiteAssessor(parallel()).assess(site_payload, ["ecology", "archaeology", "heritage"])

    assert [d.discipline for d in site.disciplines] == [Discipline.HERITAGE, Discipline.ECOLOGY]
    assert site.overall_risk is RiskLevel.HIGH


def test_failed_discipline_recorded(mocker, site_payload, emf_sink):
    """Test a discipline that fails is omitted, listed and counted."""

    def flaky(discipline, analysis, config):
        if discipline is Discipline.LANDSCAPE:
            msg = "Assessment 'landscape' execution failed"
            raise ValueError(msg)
        return run_assessment(discipline, analysis, config)

    mocker.patch("site_risk.orchestrator.run_assessment", side_effect=flaky)

    site = SiteAssessor(parallel()).assess(site_payload)

    assert Discipline.LANDSCAPE not in [d.discipline for d in site.disciplines]
    assert site.failed_disciplines == [Discipline.LANDSCAPE]
    assert site.overall_risk is RiskLevel.HIGH
    emf_sink.assert_any_call("DisciplineFailure", 1, "Count", {"discipline": "landscape"})


def test_structured_report(site_payload):
    """Test the report shape carries the summary and every discipline."""
    report = SiteAssessor(sequential()).assess(site_payload).to_structured_report()

    summary = report["structuredReport"]["summary"]
    assert summary["overallRisk"] == "extremely_high_risk"
    assert summary["failedDisciplines"] == []
    assert [d["discipline"] for d in report["structuredReport"]["disciplines"]] == [
        d.value for d in Discipline
    ]
