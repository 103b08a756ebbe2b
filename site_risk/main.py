"""API server entry point."""

import json
import logging
import logging.config
import os
import sys
from pathlib import Path

import uvicorn

from site_risk.config import ApiServerConfig


def is_running_in_ecs() -> bool:
    """Detect if running in AWS ECS (CDP environment).

    ECS injects metadata URI environment variables into containers; they are
    never present locally.
    """
    return bool(
        os.environ.get("ECS_CONTAINER_METADATA_URI_V4")
        or os.environ.get("ECS_CONTAINER_METADATA_URI")
    )


def configure_logging() -> None:
    """Configure logging based on environment.

    In ECS/CDP: Uses logging.json with structured JSON output, trace id
    injection and health check filtering.

    Locally: Uses logging-dev.json with simple text format for readability.
    """
    config_file = "logging.json" if is_running_in_ecs() else "logging-dev.json"
    config_path = Path(__file__).parent.parent / config_file

    if config_path.exists():
        with open(config_path) as f:
            logging.config.dictConfig(json.load(f))
    else:
        logging.basicConfig(
            level=logging.INFO,
            format=(
                '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
                '"logger": "%(name)s", "message": "%(message)s"}'
            ),
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


logger = logging.getLogger(__name__)


def main():
    """Serve the assessment API with uvicorn."""
    configure_logging()
    try:
        config = ApiServerConfig()
        logger.info(f"Starting site planning risk API on {config.host}:{config.port}")
        uvicorn.run(
            "site_risk.api:app",
            host=config.host,
            port=config.port,
            log_config=None,
        )
    except Exception as e:
        logger.exception(f"API server failed to start: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
