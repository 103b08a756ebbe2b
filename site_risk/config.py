"""Configuration and constants for the site planning-risk engine.

This module defines the fixed rule thresholds, the discipline-level default
recommendation text, and runtime configuration for the engine and API.

Includes configuration for:
- Rule thresholds (RuleThresholds, not configurable)
- Default recommendations per discipline (DEFAULT_RECOMMENDATIONS, overridable from JSON)
- Engine execution (RulesConfig with RULES_ prefix)
- HTTP API server (ApiServerConfig with API_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., RULES_PARALLEL_DISCIPLINES=false, API_PORT=8090)
2. .env file in the current directory
3. Default values in code
"""

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from site_risk.models.enums import Discipline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleThresholds:
    """Distance and coverage thresholds used by the rule catalogue.

    These are NOT configurable - they encode the published rule tables and
    must not vary between deployments. Proximity flags (on_site, within_50m ...)
    are pre-computed by the spatial backend; only listed buildings and
    agricultural land are classified from raw measurements here.

    All attributes are immutable (frozen=True prevents modification).
    """

    # Listed buildings (distance_m)
    LISTED_BUILDING_NEAR_M: float = 100.0
    LISTED_BUILDING_SETTING_M: float = 500.0

    # Agricultural land (summed percentage_coverage per grade)
    AG_LAND_MIN_COVERAGE_PCT: float = 20.0
    AG_LAND_GRADE_1_SHOWSTOPPER_PCT: float = 60.0
    AG_LAND_GRADE_2_HIGH_PCT: float = 80.0
    AG_LAND_GRADE_2_MEDIUM_HIGH_PCT: float = 40.0


# Module-level singleton for rule thresholds
THRESHOLDS = RuleThresholds()


class DisciplineRecommendations(BaseModel):
    """Default recommendation text for one discipline.

    Attributes:
        triggered: Shown when at least one rule triggered and none is a showstopper
        no_rules: Shown when no rule triggered
    """

    model_config = ConfigDict(frozen=True)

    triggered: list[str] = Field(default_factory=list)
    no_rules: list[str] = Field(default_factory=list)


DEFAULT_RECOMMENDATIONS: dict[Discipline, DisciplineRecommendations] = {
    Discipline.HERITAGE: DisciplineRecommendations(
        triggered=[
            "Engage a heritage consultant at an early stage of design",
            "Seek pre-application advice from the local planning authority conservation officer",
        ],
        no_rules=[
            "No significant heritage constraints identified",
            "Standard planning considerations apply",
        ],
    ),
    Discipline.LANDSCAPE: DisciplineRecommendations(
        triggered=[
            "Commission a Landscape and Visual Impact Assessment (LVIA) proportionate to "
            "the designations identified",
            "Develop a landscape mitigation strategy alongside the site layout",
        ],
        no_rules=[
            "No significant landscape designations identified",
            "Standard landscape and visual considerations apply",
        ],
    ),
    Discipline.ECOLOGY: DisciplineRecommendations(
        triggered=[
            "Commission a Preliminary Ecological Appraisal (PEA)",
            "Consult Natural England where designated sites or protected species may be affected",
        ],
        no_rules=[
            "No significant ecological designations identified",
            "A Preliminary Ecological Appraisal is still recommended to confirm site conditions",
        ],
    ),
    Discipline.AGRICULTURAL_LAND: DisciplineRecommendations(
        triggered=[
            "Commission a site-specific Agricultural Land Classification survey to confirm "
            "provisional grades",
        ],
        no_rules=[
            "No significant agricultural land constraints identified",
            "Standard planning considerations apply",
        ],
    ),
    Discipline.RENEWABLES: DisciplineRecommendations(
        triggered=[
            "Assess cumulative landscape and visual effects with nearby renewable developments",
            "Confirm grid connection capacity with the distribution network operator",
        ],
        no_rules=[
            "No large-scale renewable energy developments identified within 5km",
        ],
    ),
}

_RECOMMENDATION_OVERRIDES = TypeAdapter(dict[Discipline, DisciplineRecommendations])


class RulesConfig(BaseSettings):
    """Configuration for rule evaluation and site-level fan-out.

    Can be overridden via environment variables with RULES_ prefix:
    - RULES_PARALLEL_DISCIPLINES
    - RULES_MAX_DISCIPLINE_WORKERS
    - RULES_RECOMMENDATIONS_FILE

    Attributes:
        parallel_disciplines: Evaluate disciplines concurrently (one task each)
        max_discipline_workers: Thread pool size (None = one per discipline)
        recommendations_file: Optional JSON file overriding default recommendations,
            shaped ``{"heritage": {"triggered": [...], "no_rules": [...]}, ...}``
    """

    model_config = SettingsConfigDict(
        env_prefix="RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    parallel_disciplines: bool = Field(
        default=True, description="Evaluate disciplines concurrently"
    )
    max_discipline_workers: int | None = Field(
        default=None, ge=1, description="Worker threads for discipline fan-out (None = auto)"
    )
    recommendations_file: Path | None = Field(
        default=None, description="JSON file overriding default recommendation text"
    )

    @field_validator("recommendations_file")
    @classmethod
    def must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_file():
            msg = f"Recommendations file not found: {v}"
            raise ValueError(msg)
        return v

    def recommendations(self) -> dict[Discipline, DisciplineRecommendations]:
        """Resolve the recommendation table, applying file overrides if configured.

        Disciplines missing from the override file keep their defaults. A file
        that cannot be read or is not shaped like the table is logged and
        ignored. The file is read once per config instance.

        Returns:
            Recommendation text keyed by discipline
        """
        return dict(self.recommendation_table)

    @cached_property
    def recommendation_table(self) -> dict[Discipline, DisciplineRecommendations]:
        table = dict(DEFAULT_RECOMMENDATIONS)
        if self.recommendations_file is None:
            return table

        try:
            overrides = _RECOMMENDATION_OVERRIDES.validate_json(
                self.recommendations_file.read_bytes()
            )
        except (OSError, ValidationError) as e:
            logger.error(f"Ignoring recommendations file {self.recommendations_file}: {e}")
            return table

        table.update(overrides)
        logger.info(f"Loaded recommendation overrides from {self.recommendations_file}")
        return table


DEFAULT_RULES_CONFIG = RulesConfig()


class ApiServerConfig(BaseSettings):
    """Configuration for the HTTP API server.

    Can be overridden via environment variables with API_ prefix:
    - API_PORT (default: 8085)
    - API_HOST (default: 0.0.0.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Interface for the API server")
    port: int = Field(default=8085, ge=1, le=65535, description="Port for the API server")
