"""Unit tests for the feature payload validator."""

import math

from site_risk.models import AgriculturalLandArea, FeatureType, ListedBuilding, ProximityFeature
from site_risk.validation.errors import ValidationError
from site_risk.validation.features import FeatureValidator, parse_analysis


def test_parse_analysis_builds_typed_features(proximity_record):
    """Test each payload key is parsed into its feature model."""
    parsed = parse_analysis(
        {
            "listed_buildings": [{"grade": "Grade I", "on_site": True}],
            "scheduled_monuments": [proximity_record(within_500m=True)],
            "ag_land": [{"grade": "Grade 1", "percentage_coverage": 70}],
        }
    )

    (building,) = parsed.get(FeatureType.LISTED_BUILDINGS)
    assert isinstance(building, ListedBuilding)
    assert building.grade == "I"

    (monument,) = parsed.get(FeatureType.SCHEDULED_MONUMENTS)
    assert isinstance(monument, ProximityFeature)
    assert monument.feature_type == "scheduled_monuments"

    (area,) = parsed.get(FeatureType.AG_LAND)
    assert isinstance(area, AgriculturalLandArea)
    assert parsed.errors == []


def test_absent_and_null_collections_are_empty():
    """Test missing or null collections are treated as empty lists, not errors."""
    parsed = parse_analysis({"ramsar": None})
    assert parsed.get(FeatureType.RAMSAR) == []
    assert parsed.get(FeatureType.GCN) == []
    assert parsed.errors == []

    assert parse_analysis(None).features == {}
    assert parse_analysis({}).features == {}


def test_unknown_keys_are_ignored():
    """Test payload keys that are not feature types are skipped."""
    parsed = parse_analysis({"site_area_ha": 12.4, "aonb": []})
    assert set(parsed.features) == {FeatureType.AONB}


def test_non_mapping_records_are_skipped_and_reported():
    """Test records that are not objects are skipped with a validation error."""
    parsed = parse_analysis({"gcn": [{"on_site": True}, "not-a-record", 7]})

    assert len(parsed.get(FeatureType.GCN)) == 1
    assert [e.index for e in parsed.errors] == [1, 2]
    assert all(e.feature_type == "gcn" for e in parsed.errors)
    assert all(isinstance(e, ValidationError) for e in parsed.errors)


def test_non_list_collection_is_reported():
    """Test a collection that is not a list yields no features and one error."""
    parsed = parse_analysis({"aonb": {"on_site": True}})
    assert parsed.get(FeatureType.AONB) == []
    assert len(parsed.errors) == 1


def test_non_mapping_payload_is_reported():
    """Test a payload that is not keyed by feature type yields one error."""
    parsed = parse_analysis([{"on_site": True}])
    assert parsed.features == {}
    assert parsed.errors[0].field == "analysis"


def test_malformed_values_are_coerced_and_reported():
    """Test unreadable values coerce to safe defaults and are counted."""
    parsed = parse_analysis(
        {
            "listed_buildings": [{"grade": "II", "on_site": "perhaps", "dist_m": "close"}],
            "ag_land": [{"grade": "Grade 2", "percentage_coverage": "lots"}],
        }
    )

    (building,) = parsed.get(FeatureType.LISTED_BUILDINGS)
    assert building.on_site is False
    assert math.isinf(building.distance_m)

    (area,) = parsed.get(FeatureType.AG_LAND)
    assert area.percentage_coverage == 0.0

    assert sorted(e.field for e in parsed.errors) == ["dist_m", "on_site", "percentage_coverage"]
    assert len(parsed.errors_for([FeatureType.AG_LAND])) == 1


def test_required_fields_per_feature_type():
    """Test readability checks cover the fields each feature type relies on."""
    assert FeatureValidator(FeatureType.LISTED_BUILDINGS).required_fields() == [
        "on_site",
        "distance_m",
        "dist_m",
    ]
    assert "within_5km" in FeatureValidator(FeatureType.RAMSAR).required_fields()
    assert FeatureValidator(FeatureType.AG_LAND).required_fields() == [
        "percentage_coverage",
        "area_ha",
    ]


def test_payload_feature_type_is_overridden_by_key():
    """Test a stray feature_type attribute in a record cannot change its model."""
    parsed = parse_analysis({"green_belt": [{"feature_type": "ramsar", "on_site": True}]})
    (feature,) = parsed.get(FeatureType.GREEN_BELT)
    assert feature.feature_type == "green_belt"


def test_unreadable_proximity_distance_reported(proximity_record):
    """Test an unreadable distance on a proximity feature is reported and treated as unknown."""
    parsed = parse_analysis(
        {
            "gcn": [
                proximity_record(on_site=True, distance_m="abc"),
                proximity_record(within_250m=True, dist_m="12.5"),
            ]
        }
    )

    assert [(e.field, e.index) for e in parsed.errors] == [("distance_m", 0)]
    assert "dist_m" in FeatureValidator(FeatureType.GCN).required_fields()
    assert parsed.get(FeatureType.GCN)[1].distance_m == 12.5
