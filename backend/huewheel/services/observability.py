"""
HueWheel Observability
Prometheus metrics for name lookups and harmony generation.
"""
import time
from contextlib import contextmanager
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from huewheel.config import config


class MetricsCollector:
    """Prometheus metrics collector for HueWheel."""

    def __init__(self, enabled: Optional[bool] = None):
        self.enabled = config.METRICS_ENABLED if enabled is None else enabled
        self.registry = CollectorRegistry()

        # Counters
        self.name_lookups_total = Counter(
            'name_lookups_total',
            'Total color name lookups',
            ['outcome'],
            registry=self.registry
        )

        self.harmony_requests_total = Counter(
            'harmony_requests_total',
            'Total harmony relation requests',
            ['relation'],
            registry=self.registry
        )

        # Histograms
        self.name_lookup_duration_ms = Histogram(
            'name_lookup_duration_ms',
            'Color name lookup duration in milliseconds',
            registry=self.registry,
            buckets=[25, 50, 100, 250, 500, 1000, 2500, 5000]
        )

        self.analysis_duration_ms = Histogram(
            'analysis_duration_ms',
            'Full color analysis duration in milliseconds',
            registry=self.registry,
            buckets=[50, 100, 250, 500, 1000, 2500, 5000, 10000]
        )

    def record_name_lookup(self, outcome: str, duration_ms: float):
        """Record a finished lookup; outcome is 'resolved' or 'fallback'."""
        if self.enabled:
            self.name_lookups_total.labels(outcome=outcome).inc()
            self.name_lookup_duration_ms.observe(duration_ms)

    def record_harmony(self, relation: str):
        if self.enabled:
            self.harmony_requests_total.labels(relation=relation).inc()

    def record_analysis(self, duration_ms: float):
        if self.enabled:
            self.analysis_duration_ms.observe(duration_ms)

    def get_sample(self, name: str, labels: Optional[dict] = None) -> float:
        """Current value of one sample, 0.0 when never recorded."""
        value = self.registry.get_sample_value(name, labels or {})
        return value or 0.0

    def get_metrics(self) -> str:
        """Get Prometheus metrics in text format."""
        if self.enabled:
            return generate_latest(self.registry).decode('utf-8')
        return ""

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST


@contextmanager
def timed():
    """Yield a dict whose 'ms' key holds the elapsed time on exit."""
    elapsed = {"ms": 0.0}
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed["ms"] = (time.perf_counter() - start) * 1000


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics_collector() -> MetricsCollector:
    """Get or create the global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Drop the global collector so the next call starts from zero."""
    global _metrics
    _metrics = None
