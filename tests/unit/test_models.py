"""Unit tests for feature and result models."""

import math

import pytest
from pydantic import ValidationError

from site_risk.models import (
    AgriculturalLandArea,
    AssessmentMetadata,
    Discipline,
    DisciplineAssessment,
    ListedBuilding,
    ProximityBucket,
    ProximityFeature,
    RenewableDevelopment,
    RiskLevel,
    SiteAssessment,
    TriggeredRule,
)
from site_risk.risk import display_style


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("I", "I"),
        ("Grade I", "I"),
        ("grade ii*", "II*"),
        ("II", "II"),
        ("2*", "II*"),
        ("2", "II"),
        (" ", None),
        (None, None),
    ],
)
def test_listed_building_grade_normalisation(raw, expected):
    """Test listing grades tolerate a Grade prefix, case and numeric aliases."""
    assert ListedBuilding.model_validate({"grade": raw}).grade == expected


def test_listed_building_distance_alias_and_sentinel():
    """Test dist_m is accepted and missing/unreadable distances never match thresholds."""
    assert ListedBuilding.model_validate({"dist_m": "85.5"}).distance_m == 85.5
    assert ListedBuilding.model_validate({"distance_m": 12}).distance_m == 12.0
    assert math.isinf(ListedBuilding.model_validate({}).distance_m)
    assert math.isinf(ListedBuilding.model_validate({"dist_m": "n/a"}).distance_m)
    assert math.isinf(ListedBuilding.model_validate({"dist_m": None}).distance_m)


def test_listed_building_on_site_coercion():
    """Test on_site accepts database-style booleans."""
    assert ListedBuilding.model_validate({"on_site": "t"}).on_site is True
    assert ListedBuilding.model_validate({"on_site": "f"}).on_site is False
    assert ListedBuilding.model_validate({"on_site": None}).on_site is False
    assert ListedBuilding.model_validate({"on_site": 1}).on_site is True


@pytest.mark.parametrize(
    ("grade", "expected"),
    [
        ("Grade 1", 1),
        ("1", 1),
        ("Grade 2", 2),
        ("Grade 3a", 3),
        ("3b", 3),
        ("Grade 4", 4),
        ("5", 5),
        ("Urban", None),
        ("Non Agricultural", None),
        (None, None),
    ],
)
def test_agricultural_grade_number(grade, expected):
    """Test ALC grades fold 3a/3b into 3 and leave non-agricultural land unclassified."""
    assert AgriculturalLandArea.model_validate({"grade": grade}).grade_number == expected


def test_agricultural_coverage_defaults_to_zero():
    """Test missing or unreadable coverage coerces to 0.0."""
    assert AgriculturalLandArea.model_validate({}).percentage_coverage == 0.0
    assert AgriculturalLandArea.model_validate({"percentage_coverage": "abc"}).percentage_coverage == 0.0
    assert AgriculturalLandArea.model_validate({"percentage_coverage": "42.5"}).percentage_coverage == 42.5


def test_nearest_bucket_uses_nearest_flag():
    """Test classification picks the nearest set flag, restricted to the given buckets."""
    feature = ProximityFeature.model_validate(
        {"feature_type": "aonb", "within_100m": "true", "within_250m": True, "within_1km": 1}
    )
    assert feature.nearest_bucket() is ProximityBucket.WITHIN_100M
    assert (
        feature.nearest_bucket([ProximityBucket.ON_SITE, ProximityBucket.WITHIN_250M])
        is ProximityBucket.WITHIN_250M
    )
    assert feature.nearest_bucket([ProximityBucket.ON_SITE]) is None


def test_nearest_bucket_none_when_no_flags():
    """Test a feature with no flags set has no bucket."""
    feature = ProximityFeature(feature_type="ramsar")
    assert feature.nearest_bucket() is None


def test_feature_keeps_unknown_attributes():
    """Test extra attributes from the spatial backend are echoed back."""
    feature = ProximityFeature.model_validate(
        {"feature_type": "conservation_areas", "name": " Old Town ", "lpa": "Bath", "id": 17}
    )
    assert feature.name == "Old Town"
    assert feature.id == "17"
    assert feature.model_dump()["lpa"] == "Bath"


def test_features_are_frozen():
    """Test feature records cannot be mutated after construction."""
    feature = ProximityFeature(feature_type="gcn", on_site=True)
    with pytest.raises(ValidationError):
        feature.on_site = False


def test_renewable_measures_coerce_unreadable_to_none():
    """Test capacity and distance tolerate strings and unknown values."""
    development = RenewableDevelopment.model_validate(
        {"installed_capacity_mw": "49.9", "dist_m": "unknown", "within_3km": "t"}
    )
    assert development.installed_capacity_mw == 49.9
    assert development.distance_m is None
    assert development.nearest_bucket() is ProximityBucket.WITHIN_3KM


def test_triggered_rule_serialises_camel_case():
    """Test result models dump with camelCase keys."""
    rule = TriggeredRule(
        id="grade_ii_or_ii_star_on_site",
        level=RiskLevel.HIGH,
        rule="Grade II/II* On-Site",
        findings="1 Grade II or II* listed building(s) found on development site",
        areas=[ListedBuilding(grade="II", on_site=True, distance_m=0)],
        grade_breakdown={"II*": 0, "II": 1},
    )
    dumped = rule.model_dump(by_alias=True, mode="json")
    assert dumped["level"] == "high_risk"
    assert dumped["gradeBreakdown"] == {"II*": 0, "II": 1}
    assert dumped["areas"][0]["feature_type"] == "listed_buildings"


def test_site_assessment_structured_report_shape():
    """Test the structured report exposes summary and discipline sections."""
    assessment = DisciplineAssessment(
        discipline=Discipline.HERITAGE,
        overall_risk=None,
        default_no_rules_recommendations=["No significant heritage constraints identified"],
        metadata=AssessmentMetadata(
            total_rules_processed=16, rules_triggered=0, rules_version="heritage-rules-v2"
        ),
    )
    site = SiteAssessment(disciplines=[assessment], summary=display_style(None))

    report = site.to_structured_report()["structuredReport"]
    assert report["summary"]["overallRisk"] is None
    assert report["summary"]["overallRiskSummary"]["label"] == "NO RISK"
    assert report["summary"]["riskByDiscipline"] == []
    discipline = report["disciplines"][0]
    assert discipline["discipline"] == "heritage"
    assert discipline["overallRisk"] is None
    assert discipline["defaultNoRulesRecommendations"] == [
        "No significant heritage constraints identified"
    ]
    assert discipline["metadata"]["rulesVersion"] == "heritage-rules-v2"
