"""Core domain models for site planning-risk assessment.

These models represent features received from the spatial backend and the
results of rule evaluation as immutable value objects. Every instance is
constructed within a single evaluation call and never mutated afterwards.

Includes models for:
- Feature records (one variant per feature type, tagged by ``feature_type``)
- Triggered rules and per-discipline assessments
- Site-wide assessment and its display summary
"""

import math
from collections.abc import Sequence
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from site_risk.models.enums import Discipline, ProximityBucket, RiskLevel
from site_risk.validation.coercion import coerce_flag, coerce_number, coerce_text

# ======================================================================================
# Feature records
# ======================================================================================

PROXIMITY_FLAGS: tuple[str, ...] = tuple(bucket.value for bucket in ProximityBucket)

ALL_BUCKETS: tuple[ProximityBucket, ...] = tuple(ProximityBucket)

LISTED_BUILDING_GRADES = ("I", "II*", "II")

_HERITAGE_GRADE_ALIASES = {"1": "I", "2*": "II*", "2": "II"}

ProximityFeatureType = Literal[
    "conservation_areas",
    "scheduled_monuments",
    "aonb",
    "green_belt",
    "ramsar",
    "os_priority_ponds",
    "gcn",
]


class _FeatureBase(BaseModel):
    """Fields shared by every feature record.

    Unknown attributes from the spatial backend are kept (``extra="allow"``)
    so they are echoed back unchanged for reporting.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, description="Source feature identifier")
    name: str | None = Field(default=None, description="Feature name")

    @field_validator("id", "name", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str | None:
        return coerce_text(value)


class _ProximityFlags(BaseModel):
    """Pre-computed proximity flags and the bucket classification over them."""

    on_site: bool = Field(default=False, description="Intersects the development boundary")
    within_50m: bool = False
    within_100m: bool = False
    within_250m: bool = False
    within_500m: bool = False
    within_1km: bool = False
    within_3km: bool = False
    within_5km: bool = False

    @field_validator(*PROXIMITY_FLAGS, mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return coerce_flag(value)

    def nearest_bucket(
        self, buckets: Sequence[ProximityBucket] = ALL_BUCKETS
    ) -> ProximityBucket | None:
        """Classify the feature into exactly one of ``buckets``.

        Buckets are checked nearest first, so a feature flagged both
        ``within_100m`` and ``within_250m`` lands in the 100m bucket only.
        Flags outside ``buckets`` are ignored.

        Args:
            buckets: Bucket list of the rule set, nearest first

        Returns:
            The nearest bucket whose flag is set, or None
        """
        for bucket in buckets:
            if getattr(self, bucket.value):
                return bucket
        return None


class ProximityFeature(_FeatureBase, _ProximityFlags):
    """A designated area or record classified purely by proximity flags.

    Used for conservation areas, scheduled monuments, AONB, green belt,
    Ramsar sites, OS priority ponds and great crested newt records.
    """

    feature_type: ProximityFeatureType
    distance_m: float | None = Field(
        default=None,
        validation_alias=AliasChoices("distance_m", "dist_m"),
        description="Distance to site boundary in metres (informational)",
    )

    @field_validator("distance_m", mode="before")
    @classmethod
    def _coerce_distance(cls, value: Any) -> float | None:
        if value is None:
            return None
        return coerce_number(value, math.inf)

    @field_serializer("distance_m")
    def _serialise_distance(self, value: float | None) -> float | None:
        return None if value is None or math.isinf(value) else value


class ListedBuilding(_FeatureBase):
    """A statutorily listed building.

    Attributes:
        grade: Listing grade normalised to ``I``, ``II*`` or ``II``
        on_site: Whether the building intersects the development boundary
        distance_m: Distance to the boundary in metres; +inf when unknown
    """

    feature_type: Literal["listed_buildings"] = "listed_buildings"
    grade: str | None = Field(default=None, description="Listing grade (I, II*, II)")
    on_site: bool = False
    distance_m: float = Field(
        default=math.inf,
        validation_alias=AliasChoices("distance_m", "dist_m"),
        description="Distance to site boundary in metres (+inf when unknown)",
    )

    @field_validator("grade", mode="before")
    @classmethod
    def _normalise_grade(cls, value: Any) -> str | None:
        text = coerce_text(value)
        if text is None:
            return None
        grade = text.upper().removeprefix("GRADE").strip()
        return _HERITAGE_GRADE_ALIASES.get(grade, grade)

    @field_validator("on_site", mode="before")
    @classmethod
    def _coerce_on_site(cls, value: Any) -> bool:
        return coerce_flag(value)

    @field_validator("distance_m", mode="before")
    @classmethod
    def _coerce_distance(cls, value: Any) -> float:
        return coerce_number(value, math.inf)

    @field_serializer("distance_m")
    def _serialise_distance(self, value: float) -> float | None:
        # Unknown distance is +inf internally; JSON has no infinity
        return None if math.isinf(value) else value


class AgriculturalLandArea(_FeatureBase):
    """A provisional Agricultural Land Classification polygon clipped to the site.

    Attributes:
        grade: Grade label as supplied (``"Grade 1"``, ``"3a"``, ``"Urban"``...)
        percentage_coverage: Share of the site covered by this area (0-100)
        area_ha: Covered area in hectares, when supplied
    """

    feature_type: Literal["ag_land"] = "ag_land"
    grade: str | None = None
    percentage_coverage: float = Field(default=0.0, description="Site coverage (%)")
    area_ha: float | None = None

    @field_validator("grade", mode="before")
    @classmethod
    def _coerce_grade(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("percentage_coverage", mode="before")
    @classmethod
    def _coerce_coverage(cls, value: Any) -> float:
        return coerce_number(value, 0.0)

    @field_validator("area_ha", mode="before")
    @classmethod
    def _coerce_area(cls, value: Any) -> float | None:
        if value is None:
            return None
        return coerce_number(value, 0.0)

    @property
    def grade_number(self) -> int | None:
        """ALC grade as 1-5 (3a and 3b fold into 3); None for non-agricultural land."""
        if self.grade is None:
            return None
        token = self.grade.lower().removeprefix("grade").strip()
        token = token.removesuffix("a").removesuffix("b")
        if token in {"1", "2", "3", "4", "5"}:
            return int(token)
        return None


class RenewableDevelopment(_FeatureBase, _ProximityFlags):
    """A renewable energy development from the planning register."""

    feature_type: Literal["renewables"] = "renewables"
    site_name: str | None = None
    technology_type: str | None = None
    development_status_short: str | None = None
    installed_capacity_mw: float | None = None
    distance_m: float | None = Field(
        default=None, validation_alias=AliasChoices("distance_m", "dist_m")
    )
    direction: str | None = None

    @field_validator(
        "site_name", "technology_type", "development_status_short", "direction", mode="before"
    )
    @classmethod
    def _coerce_labels(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("installed_capacity_mw", "distance_m", mode="before")
    @classmethod
    def _coerce_measure(cls, value: Any) -> float | None:
        if value is None:
            return None
        number = coerce_number(value, math.nan)
        return None if math.isnan(number) else number


Feature = Annotated[
    ProximityFeature | ListedBuilding | AgriculturalLandArea | RenewableDevelopment,
    Field(discriminator="feature_type"),
]


# ======================================================================================
# Rule evaluation results
# ======================================================================================


class _ResultModel(BaseModel):
    """Result models serialise with camelCase keys for API consumers."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class TriggeredRule(_ResultModel):
    """The output of one rule function whose condition matched.

    Attributes:
        id: Stable slug, e.g. ``grade_i_on_site``
        level: Severity of the finding
        rule: Human-readable rule title
        findings: Description including a count and/or coverage percentage
        impact: Optional narrative of the planning impact
        recommendations: Ordered recommendation strings (may be empty)
        areas: The matched subset of input features
        grade_breakdown: Matches per listing grade (listed buildings only)
    """

    id: str
    level: RiskLevel
    rule: str
    findings: str
    impact: str | None = None
    recommendations: list[str] = Field(default_factory=list)
    areas: list[Feature] = Field(default_factory=list)
    grade_breakdown: dict[str, int] | None = None


class AssessmentMetadata(_ResultModel):
    """Bookkeeping attached to a discipline assessment.

    Attributes:
        total_rules_processed: Rule functions (or development records) evaluated
        rules_triggered: Rules in the final output
        rules_suppressed: Lower-severity rules removed by the showstopper override
        rules_version: Version tag of the discipline's rule catalogue
        degraded_feature_types: Feature types whose rule set failed and were skipped;
            the assessment under-reports risk for these
        malformed_features: Feature records that needed coercion or were skipped
    """

    total_rules_processed: int = Field(ge=0)
    rules_triggered: int = Field(ge=0)
    rules_suppressed: int = Field(default=0, ge=0)
    rules_version: str
    degraded_feature_types: list[str] = Field(default_factory=list)
    malformed_features: int = Field(default=0, ge=0)


class DisciplineAssessment(_ResultModel):
    """Aggregated rule output for one discipline."""

    discipline: Discipline
    rules: list[TriggeredRule] = Field(default_factory=list)
    overall_risk: RiskLevel | None = None
    features: dict[str, list[Feature]] = Field(
        default_factory=dict, description="Input features echoed per feature type"
    )
    default_triggered_recommendations: list[str] = Field(default_factory=list)
    default_no_rules_recommendations: list[str] = Field(default_factory=list)
    metadata: AssessmentMetadata

    @property
    def has_showstopper(self) -> bool:
        return any(rule.level is RiskLevel.SHOWSTOPPER for rule in self.rules)

    @property
    def is_degraded(self) -> bool:
        """True when one or more rule sets failed and risk may be under-reported."""
        return bool(self.metadata.degraded_feature_types)


class RiskSummary(_ResultModel):
    """Display style for a severity tier."""

    label: str
    description: str
    color: str
    background_color: str


class DisciplineRisk(_ResultModel):
    """One entry of the site summary's risk-by-discipline list."""

    name: str
    discipline: Discipline
    risk: RiskLevel
    risk_summary: RiskSummary


class SiteAssessment(_ResultModel):
    """Whole-site aggregate across the assessed disciplines.

    Attributes:
        disciplines: One assessment per discipline that completed
        overall_risk: Most severe discipline risk (None if no rule triggered anywhere)
        summary: Display summary for ``overall_risk``
        risk_by_discipline: Disciplines that produced a risk, in assessment order
        failed_disciplines: Disciplines that could not be assessed at all
    """

    disciplines: list[DisciplineAssessment] = Field(default_factory=list)
    overall_risk: RiskLevel | None = None
    summary: RiskSummary
    risk_by_discipline: list[DisciplineRisk] = Field(default_factory=list)
    failed_disciplines: list[Discipline] = Field(default_factory=list)

    def to_structured_report(self) -> dict[str, Any]:
        """Render the ``{"structuredReport": {summary, disciplines}}`` JSON shape."""
        return {
            "structuredReport": {
                "summary": {
                    "overallRisk": self.overall_risk.value if self.overall_risk else None,
                    "overallRiskSummary": self.summary.model_dump(by_alias=True, mode="json"),
                    "riskByDiscipline": [
                        entry.model_dump(by_alias=True, mode="json")
                        for entry in self.risk_by_discipline
                    ],
                    "failedDisciplines": [d.value for d in self.failed_disciplines],
                },
                "disciplines": [
                    assessment.model_dump(by_alias=True, mode="json")
                    for assessment in self.disciplines
                ],
            }
        }
