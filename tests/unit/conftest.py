"""Shared fixtures for unit tests."""

import pytest

from site_risk.models import ProximityFeature

FLAGS = (
    "on_site",
    "within_50m",
    "within_100m",
    "within_250m",
    "within_500m",
    "within_1km",
    "within_3km",
    "within_5km",
)


@pytest.fixture(autouse=True)
def emf_sink(mocker):
    """Keep CloudWatch EMF calls in-process; returns the mocked metric writer."""
    return mocker.patch("site_risk.common.metrics._put_metric")


@pytest.fixture
def proximity_record():
    """Factory for raw proximity records with every flag defaulted to False."""

    def build(**fields):
        record = dict.fromkeys(FLAGS, False)
        record.update(fields)
        return record

    return build


@pytest.fixture
def proximity_feature(proximity_record):
    """Factory for typed proximity features: ``build("ramsar", on_site=True)``."""

    def build(feature_type, **fields):
        return ProximityFeature(feature_type=feature_type, **proximity_record(**fields))

    return build
