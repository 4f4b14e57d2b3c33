"""
Standard span attributes for suboptions.

Example:
    >>> from suboptions.observability.attributes import ATTR_CONTENT_FILTER_ENABLED
    >>>
    >>> with tracer.span(
    ...     SPAN_TRANSLATE,
    ...     attributes={ATTR_CONTENT_FILTER_ENABLED: True},
    ... ):
    ...     pass
"""

SPAN_TRANSLATE = "suboptions.translate"
"""Span wrapping one options translation."""

ATTR_CONTENT_FILTER_ENABLED = "suboptions.content_filter.enabled"
"""Whether the options declare a non-empty filter expression (bool)."""

ATTR_CONTENT_FILTER_PARAMETER_COUNT = "suboptions.content_filter.parameter_count"
"""Number of expression parameters (integer)."""

ATTR_PAYLOAD_CUSTOMIZED = "suboptions.payload.customized"
"""Whether a customized middleware payload was applied (bool)."""

ATTR_PAYLOAD_IMPLEMENTATION = "suboptions.payload.implementation"
"""Middleware implementation identifier of the applied payload (string)."""

ATTR_STATISTICS_STATE = "suboptions.topic_statistics.state"
"""Topic statistics state value (string)."""

ATTR_USER_ALLOCATOR = "suboptions.allocator.user_supplied"
"""Whether a user allocator was supplied (bool)."""

__all__ = [
    "SPAN_TRANSLATE",
    "ATTR_CONTENT_FILTER_ENABLED",
    "ATTR_CONTENT_FILTER_PARAMETER_COUNT",
    "ATTR_PAYLOAD_CUSTOMIZED",
    "ATTR_PAYLOAD_IMPLEMENTATION",
    "ATTR_STATISTICS_STATE",
    "ATTR_USER_ALLOCATOR",
]
