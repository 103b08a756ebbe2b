"""CloudWatch metrics via AWS Embedded Metrics Format (EMF).

Counters emitted by the engine:
- RulesetFailure: a feature type's rule set raised and was skipped
- DisciplineFailure: a whole discipline could not be assessed
- SiteAssessment: a site-level assessment completed

Configuration via environment variables:
- AWS_EMF_ENVIRONMENT: Set to "local" for local CloudWatch agent
- AWS_EMF_AGENT_ENDPOINT: CloudWatch agent endpoint (e.g., tcp://127.0.0.1:25888)
- AWS_EMF_NAMESPACE: CloudWatch namespace for metrics
"""

from logging import getLogger

from aws_embedded_metrics import metric_scope
from aws_embedded_metrics.storage_resolution import StorageResolution

logger = getLogger(__name__)


@metric_scope
def _put_metric(
    metric_name: str, value: float, unit: str, dimensions: dict[str, str], metrics
) -> None:
    logger.debug("put metric: %s - %s - %s %s", metric_name, value, unit, dimensions)
    if dimensions:
        metrics.put_dimensions(dimensions)
    metrics.put_metric(metric_name, value, unit, StorageResolution.STANDARD)


def counter(metric_name: str, value: float = 1, **dimensions: str) -> None:
    """Increment a CloudWatch counter metric.

    Metric failures are logged and never raised, so rule evaluation is not
    affected by the metrics sink.

    Args:
        metric_name: Name of the metric in CloudWatch
        value: Counter value to record (default: 1)
        **dimensions: Optional dimensions, e.g. ``discipline="heritage"``
    """
    try:
        _put_metric(metric_name, value, "Count", dimensions)
    except Exception as e:
        logger.error("Error calling put_metric: %s", e)
