"""
Prometheus metrics for rule tree evaluations.
"""

import threading
from typing import Dict, Any, Optional

from prometheus_client import Counter, Histogram, CollectorRegistry


class EvaluationMetrics:
    """Metrics recorded around ``RuleEvaluator.evaluate`` calls."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry
        self._metrics: Dict[str, Any] = {}
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up evaluation metrics."""
        # Omitting registry registers on the prometheus_client default REGISTRY
        kwargs = {} if self.registry is None else {"registry": self.registry}

        self._metrics["rule_evaluations_total"] = Counter(
            "rule_evaluations_total",
            "Total rule tree evaluations",
            ["status"],
            **kwargs
        )

        self._metrics["rule_evaluation_duration_seconds"] = Histogram(
            "rule_evaluation_duration_seconds",
            "Rule tree evaluation duration in seconds",
            **kwargs
        )

        self._metrics["rule_nodes_evaluated_total"] = Counter(
            "rule_nodes_evaluated_total",
            "Total rule nodes visited across evaluations",
            **kwargs
        )

    def record_evaluation(self, status: str, duration: float, node_count: int):
        """Record one completed evaluation."""
        self._metrics["rule_evaluations_total"].labels(status=status).inc()
        self._metrics["rule_evaluation_duration_seconds"].observe(duration)
        self._metrics["rule_nodes_evaluated_total"].inc(node_count)


_metrics: Optional[EvaluationMetrics] = None
_metrics_lock = threading.Lock()


def get_metrics() -> EvaluationMetrics:
    """Get the process-wide metrics instance bound to the default registry."""
    global _metrics
    with _metrics_lock:
        if _metrics is None:
            _metrics = EvaluationMetrics()
        return _metrics
