from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response
import time
import logging
from typing import Dict, Any

logger = logging.getLogger("MetricsService")

REQUEST_COUNT = Counter(
    "quickmed_requests_total",
    "Total API requests",
    ["method", "endpoint", "status"]
)

LATENCY_HISTOGRAM = Histogram(
    "quickmed_analysis_latency_seconds",
    "Latency of gateway provider calls in seconds",
    ["kind"]
)

ERROR_COUNT = Counter(
    "quickmed_analysis_errors_total",
    "Total gateway provider failures",
    ["kind", "error_type"]
)

FALLBACK_COUNT = Counter(
    "quickmed_analysis_fallbacks_total",
    "Placeholder or error-shaped results returned instead of a provider result",
    ["kind", "reason"]
)

class MetricsService:
    _failure_history = {}

    @staticmethod
    def record_latency(kind: str, duration: float):
        LATENCY_HISTOGRAM.labels(kind=kind).observe(duration)

    @staticmethod
    def record_error(kind: str, error_type: str):
        ERROR_COUNT.labels(kind=kind, error_type=error_type).inc()
        MetricsService._track_health(kind, success=False)

    @staticmethod
    def record_fallback(kind: str, reason: str):
        FALLBACK_COUNT.labels(kind=kind, reason=reason).inc()

    @staticmethod
    def record_request(method: str, endpoint: str, status: int):
        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status=status).inc()

    @staticmethod
    def record_success(kind: str):
        MetricsService._track_health(kind, success=True)

    @classmethod
    def _track_health(cls, kind: str, success: bool):
        now = time.time()
        if kind not in cls._failure_history:
            cls._failure_history[kind] = []

        cls._failure_history[kind].append((now, success))
        cls._failure_history[kind] = [x for x in cls._failure_history[kind] if now - x[0] < 600]

        data = cls._failure_history[kind]
        if len(data) >= 10:
            failures = len([x for x in data if not x[1]])
            rate = failures / len(data)
            if rate > 0.1:
                logger.critical(f"ANALYSIS_DEGRADED: {kind} failure rate is {rate*100:.1f}%")

    @classmethod
    def get_health_report(cls) -> Dict[str, Any]:
        report = {}
        for kind, data in cls._failure_history.items():
            if not data: continue
            failures = len([x for x in data if not x[1]])
            report[kind] = {
                "status": "UNHEALTHY" if (failures / len(data)) > 0.1 else "HEALTHY",
                "error_rate": f"{(failures / len(data)) * 100:.1f}%",
                "sample_size": len(data)
            }
        return report

    @classmethod
    def reset(cls):
        cls._failure_history = {}

def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
