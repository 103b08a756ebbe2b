"""Assessment execution infrastructure.

This package provides the runner for discipline assessments:
- run_assessment(): Main entry point for running any registered discipline

Assessments follow a simple pattern:
- Constructor: __init__(analysis, config)
- Run method: run() -> DisciplineAssessment
"""

from site_risk.runner.runner import ASSESSMENT_TYPES, run_assessment

__all__ = [
    "ASSESSMENT_TYPES",
    "run_assessment",
]
