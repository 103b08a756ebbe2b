#!/usr/bin/env python

"""Assess a site from a spatial analysis JSON file.

Reads a payload keyed by feature type (the same shape the API accepts under
``analysis``) and prints the site report as JSON. Useful for checking rule
behaviour locally without running the API.

Usage:
    uv run python scripts/assess_site.py analysis.json
    uv run python scripts/assess_site.py analysis.json -d heritage -d ecology
    uv run python scripts/assess_site.py analysis.json --output report.json
    uv run python scripts/assess_site.py --help
"""

import json
import logging
from pathlib import Path

import typer

from site_risk.config import RulesConfig
from site_risk.models.enums import Discipline
from site_risk.orchestrator import SiteAssessor

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = typer.Typer(help="Assess planning risk for a site from spatial analysis results")


@app.command()
def assess(
    analysis_file: Path = typer.Argument(
        ...,
        help="JSON file mapping feature type to a list of feature records",
        exists=True,
        dir_okay=False,
    ),
    discipline: list[Discipline] = typer.Option(
        None,
        "--discipline",
        "-d",
        help="Discipline to assess (repeatable; default: all)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout",
    ),
    sequential: bool = typer.Option(
        False,
        "--sequential",
        help="Assess disciplines one after another instead of in parallel",
    ),
):
    """Assess a site and print the structured report."""
    logger.info(f"Analysis file: {analysis_file}")

    try:
        with open(analysis_file, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Analysis file is not valid JSON: {e}")
        raise typer.Exit(1) from e

    # The API request shape ({"analysis": {...}}) is accepted too
    if isinstance(payload, dict) and isinstance(payload.get("analysis"), dict):
        payload = payload["analysis"]

    config = RulesConfig(parallel_disciplines=not sequential)
    site = SiteAssessor(config).assess(payload, discipline or None)

    report = json.dumps(site.to_structured_report(), indent=2)
    if output:
        output.write_text(report, encoding="utf-8")
        logger.info(f"Report written to {output}")
    else:
        typer.echo(report)

    overall = site.overall_risk.value if site.overall_risk else "none"
    logger.info(f"Overall risk: {overall}")
    if site.failed_disciplines:
        logger.warning(
            f"Failed disciplines: {', '.join(d.value for d in site.failed_disciplines)}"
        )


if __name__ == "__main__":
    app()
