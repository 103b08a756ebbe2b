"""Feature payload validator for spatial analysis results.

Converts the raw ``{feature_type: [record, ...]}`` mapping produced by the
spatial backend into typed feature models. Nothing here raises for bad data:
absent collections become empty lists, unreadable values are coerced, and
records that are not objects at all are skipped. Every such repair is
reported as a ``ValidationError`` so callers can surface it.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from site_risk.models.domain import (
    PROXIMITY_FLAGS,
    AgriculturalLandArea,
    Feature,
    ListedBuilding,
    ProximityFeature,
    RenewableDevelopment,
)
from site_risk.models.enums import FeatureType
from site_risk.validation.coercion import is_flag_like, is_number_like
from site_risk.validation.errors import MalformedFeature, ValidationError

logger = logging.getLogger(__name__)


FEATURE_MODELS: dict[FeatureType, type[BaseModel]] = {
    FeatureType.LISTED_BUILDINGS: ListedBuilding,
    FeatureType.CONSERVATION_AREAS: ProximityFeature,
    FeatureType.SCHEDULED_MONUMENTS: ProximityFeature,
    FeatureType.AONB: ProximityFeature,
    FeatureType.GREEN_BELT: ProximityFeature,
    FeatureType.RAMSAR: ProximityFeature,
    FeatureType.OS_PRIORITY_PONDS: ProximityFeature,
    FeatureType.GCN: ProximityFeature,
    FeatureType.AG_LAND: AgriculturalLandArea,
    FeatureType.RENEWABLES: RenewableDevelopment,
}

_FLAG_FIELDS: dict[FeatureType, tuple[str, ...]] = {
    FeatureType.LISTED_BUILDINGS: ("on_site",),
    FeatureType.AG_LAND: (),
}

_DISTANCE_FIELDS = ("distance_m", "dist_m")

# Feature types not listed here carry only the distance fields
_NUMBER_FIELDS: dict[FeatureType, tuple[str, ...]] = {
    FeatureType.LISTED_BUILDINGS: _DISTANCE_FIELDS,
    FeatureType.AG_LAND: ("percentage_coverage", "area_ha"),
    FeatureType.RENEWABLES: (*_DISTANCE_FIELDS, "installed_capacity_mw"),
}


@dataclass
class ParsedAnalysis:
    """Typed features keyed by feature type, plus the repairs made to get them.

    Attributes:
        features: Parsed features for every feature type present in the payload
        errors: One entry per malformed value or skipped record
    """

    features: dict[FeatureType, list[Feature]] = field(default_factory=dict)
    errors: list[ValidationError] = field(default_factory=list)

    def get(self, feature_type: FeatureType) -> list[Feature]:
        """Features of one type; an absent collection is an empty list."""
        return self.features.get(feature_type, [])

    def errors_for(self, feature_types: list[FeatureType]) -> list[ValidationError]:
        keys = {ft.value for ft in feature_types}
        return [e for e in self.errors if e.feature_type in keys]


class FeatureValidator:
    """Validates and coerces feature records for one feature type."""

    def __init__(self, feature_type: FeatureType):
        self.feature_type = feature_type
        self.model = FEATURE_MODELS[feature_type]

    def required_fields(self) -> list[str]:
        """Fields whose values are checked for readability."""
        flags = _FLAG_FIELDS.get(self.feature_type, PROXIMITY_FLAGS)
        return [*flags, *_NUMBER_FIELDS.get(self.feature_type, _DISTANCE_FIELDS)]

    def validate(self, record: Mapping[str, Any], index: int) -> list[ValidationError]:
        """Report values that will be coerced to their safe defaults.

        Args:
            record: Raw feature record
            index: Position of the record in its collection

        Returns:
            List of validation errors (empty if every value is readable)
        """
        errors = []
        for name in _FLAG_FIELDS.get(self.feature_type, PROXIMITY_FLAGS):
            value = record.get(name)
            if not is_flag_like(value):
                errors.append(self._error(f"Unreadable flag {value!r}, treated as false", name, index))
        for name in _NUMBER_FIELDS.get(self.feature_type, _DISTANCE_FIELDS):
            value = record.get(name)
            if not is_number_like(value):
                errors.append(self._error(f"Unreadable number {value!r}, using default", name, index))
        return errors

    def parse(self, record: Any, index: int) -> Feature:
        """Build a typed feature from one raw record.

        Raises:
            MalformedFeature: If the record is not an object or cannot be modelled
        """
        if not isinstance(record, Mapping):
            msg = f"Expected an object, got {type(record).__name__}"
            raise MalformedFeature(msg)
        data = {**record, "feature_type": self.feature_type.value}
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            msg = f"Could not build {self.model.__name__}: {e.error_count()} error(s)"
            raise MalformedFeature(msg) from e

    def _error(self, message: str, field_name: str | None, index: int) -> ValidationError:
        return ValidationError(
            message=message,
            field=field_name,
            feature_type=self.feature_type.value,
            index=index,
        )

    def parse_all(self, records: Any) -> tuple[list[Feature], list[ValidationError]]:
        """Parse a whole collection, skipping records that cannot be modelled.

        Args:
            records: List of raw records; None is treated as empty

        Returns:
            Tuple of (features, validation errors)
        """
        if records is None:
            return [], []
        if isinstance(records, Mapping) or not isinstance(records, list | tuple):
            error = self._error(
                f"Expected a list of records, got {type(records).__name__}", None, 0
            )
            return [], [error]

        features: list[Feature] = []
        errors: list[ValidationError] = []
        for index, record in enumerate(records):
            try:
                feature = self.parse(record, index)
            except MalformedFeature as e:
                errors.append(self._error(f"Skipped record: {e}", None, index))
                continue
            errors.extend(self.validate(record, index))
            features.append(feature)
        return features, errors


def parse_analysis(payload: Mapping[str, Any] | None) -> ParsedAnalysis:
    """Parse a spatial analysis payload into typed features.

    Keys that are not feature types are ignored.

    Args:
        payload: Mapping of feature-type key to list of records

    Returns:
        ParsedAnalysis with typed features and any validation errors
    """
    parsed = ParsedAnalysis()
    if not payload:
        return parsed
    if not isinstance(payload, Mapping):
        logger.warning(f"Ignoring analysis payload of type {type(payload).__name__}")
        parsed.errors.append(
            ValidationError(
                message=f"Expected an object keyed by feature type, got {type(payload).__name__}",
                field="analysis",
            )
        )
        return parsed

    for key, records in payload.items():
        try:
            feature_type = FeatureType(key)
        except ValueError:
            logger.debug(f"Ignoring unknown payload key: {key}")
            continue
        features, errors = FeatureValidator(feature_type).parse_all(records)
        parsed.features[feature_type] = features
        parsed.errors.extend(errors)

    if parsed.errors:
        logger.warning(f"Coerced or skipped {len(parsed.errors)} malformed feature value(s)")
    return parsed
