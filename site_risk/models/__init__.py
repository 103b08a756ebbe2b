"""Domain models for site planning-risk assessment."""

from site_risk.models.domain import (
    AgriculturalLandArea,
    AssessmentMetadata,
    DisciplineAssessment,
    DisciplineRisk,
    Feature,
    ListedBuilding,
    ProximityFeature,
    RenewableDevelopment,
    RiskSummary,
    SiteAssessment,
    TriggeredRule,
)
from site_risk.models.enums import Discipline, FeatureType, ProximityBucket, RiskLevel

__all__ = [
    "Feature",
    "ProximityFeature",
    "ListedBuilding",
    "AgriculturalLandArea",
    "RenewableDevelopment",
    "TriggeredRule",
    "AssessmentMetadata",
    "DisciplineAssessment",
    "DisciplineRisk",
    "RiskSummary",
    "SiteAssessment",
    "RiskLevel",
    "Discipline",
    "FeatureType",
    "ProximityBucket",
]
