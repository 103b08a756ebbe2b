"""Per-feature-type rule sets.

One module per feature type, each exposing ``RULE_SET``.
"""

from site_risk.models.enums import FeatureType
from site_risk.rules import (
    ag_land,
    aonb,
    conservation_areas,
    gcn,
    green_belt,
    listed_buildings,
    priority_ponds,
    ramsar,
    renewables,
    scheduled_monuments,
)
from site_risk.rules.base import RuleSet

RULE_SETS: dict[FeatureType, RuleSet] = {
    FeatureType.LISTED_BUILDINGS: listed_buildings.RULE_SET,
    FeatureType.CONSERVATION_AREAS: conservation_areas.RULE_SET,
    FeatureType.SCHEDULED_MONUMENTS: scheduled_monuments.RULE_SET,
    FeatureType.AONB: aonb.RULE_SET,
    FeatureType.GREEN_BELT: green_belt.RULE_SET,
    FeatureType.RAMSAR: ramsar.RULE_SET,
    FeatureType.OS_PRIORITY_PONDS: priority_ponds.RULE_SET,
    FeatureType.GCN: gcn.RULE_SET,
    FeatureType.AG_LAND: ag_land.RULE_SET,
    FeatureType.RENEWABLES: renewables.RULE_SET,
}

__all__ = ["RULE_SETS", "RuleSet"]
