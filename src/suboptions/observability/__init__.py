"""
Observability utilities for suboptions.

Note:
    OpenTelemetry is an optional dependency. Everything here works when it
    is not installed; tracers then fall back to NullTracer.
"""

from suboptions.observability.attributes import (
    ATTR_CONTENT_FILTER_ENABLED,
    ATTR_CONTENT_FILTER_PARAMETER_COUNT,
    ATTR_PAYLOAD_CUSTOMIZED,
    ATTR_PAYLOAD_IMPLEMENTATION,
    ATTR_STATISTICS_STATE,
    ATTR_USER_ALLOCATOR,
    SPAN_TRANSLATE,
)
from suboptions.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)
from suboptions.observability.tracing import OTEL_AVAILABLE

__all__ = [
    "OTEL_AVAILABLE",
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    "SPAN_TRANSLATE",
    "ATTR_CONTENT_FILTER_ENABLED",
    "ATTR_CONTENT_FILTER_PARAMETER_COUNT",
    "ATTR_PAYLOAD_CUSTOMIZED",
    "ATTR_PAYLOAD_IMPLEMENTATION",
    "ATTR_STATISTICS_STATE",
    "ATTR_USER_ALLOCATOR",
]
