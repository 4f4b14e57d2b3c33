"""
OpenTelemetry availability for suboptions.

OpenTelemetry is an optional dependency (``pip install suboptions-py[telemetry]``).
This module is the single place that checks whether it is installed.
"""

from __future__ import annotations

# Optional OpenTelemetry import - single source of truth
try:
    import opentelemetry.trace  # noqa: F401

    OTEL_AVAILABLE = True
except ImportError:
    OTEL_AVAILABLE = False


__all__ = [
    "OTEL_AVAILABLE",
]
