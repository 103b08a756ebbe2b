"""Site assessment orchestrator - parse payload, fan out disciplines, aggregate."""

import logging
import time
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from site_risk.common.metrics import counter
from site_risk.config import DEFAULT_RULES_CONFIG, RulesConfig
from site_risk.models.domain import DisciplineAssessment, DisciplineRisk, SiteAssessment
from site_risk.models.enums import Discipline
from site_risk.risk import max_severity, risk_summary
from site_risk.runner.runner import ASSESSMENT_TYPES, run_assessment
from site_risk.validation.features import ParsedAnalysis, parse_analysis

logger = logging.getLogger(__name__)


def assess_site(
    results: Sequence[DisciplineAssessment],
    failed_disciplines: Sequence[Discipline] = (),
) -> SiteAssessment:
    """Combine discipline assessments into a site assessment.

    The overall risk is the most severe discipline risk. No override logic is
    applied here; showstopper handling already happened per discipline.

    Args:
        results: Discipline assessments, in report order
        failed_disciplines: Disciplines that could not be assessed

    Returns:
        SiteAssessment with overall risk and display summary
    """
    overall_risk = max_severity(result.overall_risk for result in results)

    risk_by_discipline = [
        DisciplineRisk(
            name=result.discipline.label,
            discipline=result.discipline,
            risk=result.overall_risk,
            risk_summary=risk_summary(result.overall_risk),
        )
        for result in results
        if result.overall_risk is not None
    ]

    return SiteAssessment(
        disciplines=list(results),
        overall_risk=overall_risk,
        summary=risk_summary(overall_risk),
        risk_by_discipline=risk_by_discipline,
        failed_disciplines=list(failed_disciplines),
    )


class SiteAssessor:
    """Orchestrates a site assessment: parse → assess each discipline → aggregate.

    Disciplines share no mutable state, so with ``parallel_disciplines``
    enabled each one runs as its own task on a thread pool. A discipline that
    fails is logged, counted and listed in ``failed_disciplines``; the site
    assessment still completes.
    """

    def __init__(self, config: RulesConfig = DEFAULT_RULES_CONFIG):
        self.config = config

    def assess(
        self,
        payload: ParsedAnalysis | Mapping[str, Any] | None,
        disciplines: Sequence[Discipline | str] | None = None,
    ) -> SiteAssessment:
        """Assess a site across the requested disciplines.

        Args:
            payload: Raw ``{feature_type: [records]}`` analysis, or an already parsed one
            disciplines: Disciplines to assess (default: all, in registry order).
                Unknown names are logged and ignored.

        Returns:
            The site assessment
        """
        start_time = time.time()
        selected = self._resolve_disciplines(disciplines)
        analysis = payload if isinstance(payload, ParsedAnalysis) else parse_analysis(payload)

        logger.info(f"Assessing site across {len(selected)} discipline(s)")

        if self.config.parallel_disciplines and len(selected) > 1:
            workers = self.config.max_discipline_workers or len(selected)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    executor.submit(self._run_discipline, discipline, analysis)
                    for discipline in selected
                ]
                outcomes = [future.result() for future in futures]
        else:
            outcomes = [self._run_discipline(discipline, analysis) for discipline in selected]

        results = [outcome for outcome in outcomes if outcome is not None]
        failed = [d for d, outcome in zip(selected, outcomes, strict=True) if outcome is None]

        site = assess_site(results, failed)
        counter("SiteAssessment")

        overall = site.overall_risk.value if site.overall_risk else "none"
        logger.info(
            f"Site assessment completed in {time.time() - start_time:.3f}s: "
            f"overall risk {overall}, {len(failed)} failed discipline(s)"
        )
        return site

    def _resolve_disciplines(
        self, disciplines: Sequence[Discipline | str] | None
    ) -> list[Discipline]:
        if disciplines is None:
            return list(ASSESSMENT_TYPES)

        requested = set()
        for name in disciplines:
            try:
                requested.add(Discipline(name))
            except ValueError:
                logger.warning(f"Ignoring unknown discipline: {name}")
        # Keep report order regardless of request order
        return [d for d in ASSESSMENT_TYPES if d in requested]

    def _run_discipline(
        self, discipline: Discipline, analysis: ParsedAnalysis
    ) -> DisciplineAssessment | None:
        try:
            return run_assessment(discipline, analysis, self.config)
        except Exception:
            logger.exception(f"{discipline.value} assessment failed; omitting from site report")
            counter("DisciplineFailure", discipline=discipline.value)
            return None
