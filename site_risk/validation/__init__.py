"""Validation of spatial analysis payloads.

Feature records arrive from an external spatial backend as loosely typed JSON.
They are coerced into typed feature models once, at the boundary
(see ``site_risk.validation.features``), so rule logic never sees raw records.
"""

from site_risk.validation.errors import InvalidRiskLevel, MalformedFeature, ValidationError

__all__ = [
    "ValidationError",
    "InvalidRiskLevel",
    "MalformedFeature",
]
