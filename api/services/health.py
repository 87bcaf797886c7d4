"""
Health Check Service

Reports service health: a decoder self-check against a known reference
identifier, plus host metrics and feature flags.
"""

import os
import time
import psutil
from datetime import date, datetime
from typing import Dict, Any
from opentelemetry import trace

from domain.identity import decode

tracer = trace.get_tracer(__name__)

# Reference vector: 1980-01-01, male, citizen, Luhn-valid
SELF_CHECK_ID_NUMBER = "8001015009087"
SELF_CHECK_DATE = date(2020, 6, 15)


class HealthCheckService:
    """Service for system health monitoring."""

    def __init__(self, service_name: str, service_version: str = "1.0.0"):
        self.service_name = service_name
        self.service_version = service_version

    def get_comprehensive_health(self) -> Dict[str, Any]:
        """Get health status including the decoder self-check and metrics."""
        with tracer.start_as_current_span("health.comprehensive_check") as span:
            start_time = time.time()

            decoder_health = self._check_decoder_health()
            overall_status = "healthy" if decoder_health["status"] == "healthy" else "unhealthy"

            response_time_ms = round((time.time() - start_time) * 1000, 2)

            health_data = {
                "status": overall_status,
                "service": self.service_name,
                "version": self.service_version,
                "environment": os.getenv('ENVIRONMENT', 'development'),
                "timestamp": datetime.utcnow().isoformat() + "Z",
                "response_time_ms": response_time_ms,
                "checks": {
                    "identity_decoder": decoder_health
                },
                "system_metrics": self._get_system_metrics(),
                "feature_flags": self._get_feature_flags()
            }

            span.set_attributes({
                "health.overall_status": overall_status,
                "health.response_time_ms": response_time_ms
            })

            return health_data

    def _check_decoder_health(self) -> Dict[str, Any]:
        """Decode the reference identifier and compare with the expected facts."""
        result = decode(SELF_CHECK_ID_NUMBER, SELF_CHECK_DATE)
        expected = (True, date(1980, 1, 1), 40)
        actual = (result.valid, result.date_of_birth, result.age)

        if actual == expected:
            return {"status": "healthy"}
        return {
            "status": "unhealthy",
            "error": f"Reference identifier decoded unexpectedly: {actual}"
        }

    def _get_system_metrics(self) -> Dict[str, Any]:
        """Get basic system performance metrics."""
        try:
            memory = psutil.virtual_memory()
            process = psutil.Process(os.getpid())

            return {
                "cpu_percent": psutil.cpu_percent(interval=None),
                "memory": {
                    "used_mb": round(memory.used / 1024 / 1024, 2),
                    "total_mb": round(memory.total / 1024 / 1024, 2),
                    "percent": memory.percent
                },
                "uptime_seconds": round(time.time() - process.create_time(), 2),
                "load_average": list(os.getloadavg()) if hasattr(os, 'getloadavg') else None
            }
        except (psutil.Error, OSError) as e:
            return {
                "error": f"Failed to collect system metrics: {str(e)}"
            }

    def _get_feature_flags(self) -> Dict[str, bool]:
        """Get current feature flag status."""
        return {
            "docs_enabled": os.getenv('DOCS_ENABLED', 'true').lower() == 'true',
            "otel_enabled": os.getenv('OTEL_ENABLED', 'true').lower() == 'true'
        }
