"""Risk level vocabulary: ranking, severity merging and display styles.

Severity is compared by rank position only (Showstopper = 0 ... Low = 6).
"""

import logging
from collections.abc import Iterable

from site_risk.models.domain import RiskSummary
from site_risk.models.enums import RiskLevel
from site_risk.validation.errors import InvalidRiskLevel

logger = logging.getLogger(__name__)


RISK_STYLES: dict[RiskLevel, RiskSummary] = {
    RiskLevel.SHOWSTOPPER: RiskSummary(
        label="SHOWSTOPPER",
        description="Development likely not viable without major redesign",
        color="#dc2626",
        background_color="#fef2f2",
    ),
    RiskLevel.EXTREMELY_HIGH: RiskSummary(
        label="EXTREMELY HIGH RISK",
        description="Major constraints, extensive specialist input required",
        color="#b91c1c",
        background_color="#fee2e2",
    ),
    RiskLevel.HIGH: RiskSummary(
        label="HIGH RISK",
        description="Significant constraints, specialist assessment required",
        color="#ea580c",
        background_color="#fff7ed",
    ),
    RiskLevel.MEDIUM_HIGH: RiskSummary(
        label="MEDIUM-HIGH RISK",
        description="Moderate constraints, careful design required",
        color="#d97706",
        background_color="#fffbeb",
    ),
    RiskLevel.MEDIUM: RiskSummary(
        label="MEDIUM RISK",
        description="Notable constraints, proportionate assessment required",
        color="#f59e0b",
        background_color="#fff7ed",
    ),
    RiskLevel.MEDIUM_LOW: RiskSummary(
        label="MEDIUM-LOW RISK",
        description="Minor constraints, basic mitigation measures",
        color="#10b981",
        background_color="#ecfdf5",
    ),
    RiskLevel.LOW: RiskSummary(
        label="LOW RISK",
        description="Minimal constraints, standard mitigation measures",
        color="#059669",
        background_color="#ecfdf5",
    ),
}

NO_RISK_STYLE = RiskSummary(
    label="NO RISK",
    description="No significant constraints identified",
    color="#10b981",
    background_color="#ecfdf5",
)

NOT_ASSESSED_STYLE = RiskSummary(
    label="NOT ASSESSED",
    description="Risk level could not be determined",
    color="#6b7280",
    background_color="#f3f4f6",
)


def rank(level: RiskLevel | str) -> int:
    """Return the severity rank of ``level`` (lower is more severe).

    Raises:
        InvalidRiskLevel: If ``level`` is not a recognised severity token
    """
    return RiskLevel.parse(level).rank


def max_severity(levels: Iterable[RiskLevel | str | None]) -> RiskLevel | None:
    """Return the most severe level in ``levels``.

    Absent entries (None) are ignored.

    Returns:
        The level with the lowest rank, or None if there is none

    Raises:
        InvalidRiskLevel: If any entry is not a recognised severity token
    """
    present = [RiskLevel.parse(level) for level in levels if level is not None]
    if not present:
        return None
    return min(present, key=lambda level: level.rank)


def display_style(level: RiskLevel | str | None) -> RiskSummary:
    """Look up the label, description and colours for a severity.

    ``None`` resolves to the "no risk" style.

    Raises:
        InvalidRiskLevel: If ``level`` is not a recognised severity token
    """
    if level is None:
        return NO_RISK_STYLE
    return RISK_STYLES[RiskLevel.parse(level)]


def risk_summary(level: RiskLevel | str | None) -> RiskSummary:
    """Lenient variant of ``display_style`` used during aggregation.

    An unrecognised token is logged and resolves to the "not assessed" style
    instead of failing the caller.
    """
    try:
        return display_style(level)
    except InvalidRiskLevel as e:
        logger.warning(f"Falling back to 'not assessed' display style: {e}")
        return NOT_ASSESSED_STYLE
