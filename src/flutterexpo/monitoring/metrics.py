"""
Metrics Collection
Prometheus metrics for bridge throughput and failures
"""

import time
from prometheus_client import Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the bridge.
    """

    def __init__(self) -> None:
        # Protocol metrics
        self.messages_total = Counter(
            "bridge_messages_total",
            "Total number of inbound messages",
            ["type"],
        )
        self.errors_total = Counter(
            "bridge_errors_total",
            "Total number of ERROR replies sent",
            ["code"],
        )

        # Translation metrics
        self.translation_duration = Histogram(
            "bridge_translation_duration_seconds",
            "UI AST translation duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )
        self.unmapped_widgets = Counter(
            "bridge_unmapped_widgets_total",
            "Widgets translated with the generic fallback",
            ["widget_type"],
        )

        # Generation metrics
        self.generations_total = Counter(
            "bridge_generations_total",
            "Total number of source generation runs",
            ["status"],
        )
        self.generation_duration = Histogram(
            "bridge_generation_duration_seconds",
            "Source generation duration in seconds",
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
        )

        # Session metrics
        self.active_sessions = Gauge(
            "bridge_active_sessions",
            "Currently open viewer sessions",
        )
        self.broadcasts_total = Counter(
            "bridge_broadcasts_total",
            "Total number of broadcast fan-outs",
            ["type"],
        )

        # System metrics
        self.uptime = Gauge(
            "bridge_uptime_seconds",
            "Service uptime in seconds",
        )
        self.start_time = time.time()

    def record_message(self, msg_type: str) -> None:
        """Record an inbound message."""
        self.messages_total.labels(type=msg_type).inc()

    def record_error(self, code: str) -> None:
        """Record an ERROR reply."""
        self.errors_total.labels(code=code).inc()

    def record_translation(self, duration: float, unmapped_types: list[str]) -> None:
        """Record a translation and its fallback widgets."""
        self.translation_duration.observe(duration)
        for widget_type in unmapped_types:
            self.unmapped_widgets.labels(widget_type=widget_type).inc()

    def record_generation(self, status: str, duration: float) -> None:
        """Record a source generation run."""
        self.generations_total.labels(status=status).inc()
        self.generation_duration.observe(duration)

    def record_broadcast(self, msg_type: str) -> None:
        """Record a broadcast fan-out."""
        self.broadcasts_total.labels(type=msg_type).inc()

    def set_active_sessions(self, count: int) -> None:
        """Set the open session gauge."""
        self.active_sessions.set(count)

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
