"""Enumerations shared by rules, aggregators and the API.

Values are the serialized tokens used in JSON payloads and responses.
"""

from enum import Enum

from site_risk.validation.errors import InvalidRiskLevel


class RiskLevel(Enum):
    """Severity tiers, declared most severe first.

    Ordering is by declaration position (see ``rank``), never by the string
    value. "No risk / not evaluated" is represented by ``None``, not a member.
    """

    SHOWSTOPPER = "showstopper"
    EXTREMELY_HIGH = "extremely_high_risk"
    HIGH = "high_risk"
    MEDIUM_HIGH = "medium_high_risk"
    MEDIUM = "medium_risk"
    MEDIUM_LOW = "medium_low_risk"
    LOW = "low_risk"

    @property
    def rank(self) -> int:
        """Position in the severity order: 0 is Showstopper, 6 is Low."""
        return _RANKS[self]

    @classmethod
    def parse(cls, token: "RiskLevel | str") -> "RiskLevel":
        """Resolve a member from a serialized token or a member name.

        Accepts ``"extremely_high_risk"``, ``"EXTREMELY_HIGH"``, ``"ExtremelyHigh"``
        and ``"extremely high"``.

        Raises:
            InvalidRiskLevel: If the token does not name a severity tier
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            msg = f"Unrecognised risk level: {token!r}"
            raise InvalidRiskLevel(msg)

        key = _normalise_token(token)
        level = _LOOKUP.get(key)
        if level is None:
            msg = f"Unrecognised risk level: {token!r}"
            raise InvalidRiskLevel(msg)
        return level


def _normalise_token(token: str) -> str:
    # "ExtremelyHigh" -> "extremely_high", "medium-low risk" -> "medium_low_risk"
    token = token.strip()
    chars = []
    for i, ch in enumerate(token):
        if ch.isupper() and i > 0 and token[i - 1].islower():
            chars.append("_")
        chars.append(ch.lower())
    return "".join(chars).replace("-", "_").replace(" ", "_")


_RANKS: dict[RiskLevel, int] = {level: i for i, level in enumerate(RiskLevel)}

_LOOKUP: dict[str, RiskLevel] = {
    key: level
    for level in RiskLevel
    for key in (level.value, level.name.lower(), level.value.removesuffix("_risk"))
}


class Discipline(Enum):
    """Regulatory domains that group feature types."""

    HERITAGE = "heritage"
    LANDSCAPE = "landscape"
    ECOLOGY = "ecology"
    AGRICULTURAL_LAND = "ag_land"
    RENEWABLES = "renewables"

    @property
    def label(self) -> str:
        return _DISCIPLINE_LABELS[self]


_DISCIPLINE_LABELS = {
    Discipline.HERITAGE: "Heritage",
    Discipline.LANDSCAPE: "Landscape",
    Discipline.ECOLOGY: "Ecology",
    Discipline.AGRICULTURAL_LAND: "Agricultural Land",
    Discipline.RENEWABLES: "Renewables",
}


class FeatureType(Enum):
    """Feature-type keys of the spatial analysis payload."""

    LISTED_BUILDINGS = "listed_buildings"
    CONSERVATION_AREAS = "conservation_areas"
    SCHEDULED_MONUMENTS = "scheduled_monuments"
    AONB = "aonb"
    GREEN_BELT = "green_belt"
    RAMSAR = "ramsar"
    OS_PRIORITY_PONDS = "os_priority_ponds"
    GCN = "gcn"
    AG_LAND = "ag_land"
    RENEWABLES = "renewables"


class ProximityBucket(Enum):
    """Proximity flags, nearest first.

    Values are the flag field names carried by features.
    """

    ON_SITE = "on_site"
    WITHIN_50M = "within_50m"
    WITHIN_100M = "within_100m"
    WITHIN_250M = "within_250m"
    WITHIN_500M = "within_500m"
    WITHIN_1KM = "within_1km"
    WITHIN_3KM = "within_3km"
    WITHIN_5KM = "within_5km"

    @property
    def label(self) -> str:
        """Short display label, e.g. ``"On-site"`` or ``"250m"``."""
        if self is ProximityBucket.ON_SITE:
            return "On-site"
        return self.value.removeprefix("within_")


class DevelopmentStatus(Enum):
    """Status categories for renewable energy developments."""

    REFUSED = "refused"
    ACTIVE = "active"
    COMMITTED = "committed"

    @classmethod
    def from_status_text(cls, status: str | None) -> "DevelopmentStatus | None":
        """Classify a development status string from the renewables register.

        Returns:
            The status category, or None for statuses no rule applies to
            (e.g. withdrawn or abandoned applications)
        """
        if not status:
            return None
        return _STATUS_CATEGORIES.get(status.strip().lower())


_STATUS_CATEGORIES = {
    "appeal refused": DevelopmentStatus.REFUSED,
    "application refused": DevelopmentStatus.REFUSED,
    "application submitted": DevelopmentStatus.ACTIVE,
    "awaiting construction": DevelopmentStatus.ACTIVE,
    "revised": DevelopmentStatus.ACTIVE,
    "under construction": DevelopmentStatus.COMMITTED,
    "operational": DevelopmentStatus.COMMITTED,
}
