"""
In-memory transport implementation.

Provides a transport that builds records in memory and validates content
filters the way a DDS middleware would, without creating any entities.
Used as the default transport and in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from suboptions.content_filter import QUOTE_CHARS, placeholder_indices
from suboptions.exceptions import TransportError
from suboptions.transport.interface import (
    SubscriptionTransport,
    TransportContentFilterOptions,
    TransportOptionsRecord,
)

logger = logging.getLogger(__name__)

# Upper bound on expression parameters accepted by DDS content filters
MAX_EXPRESSION_PARAMETERS = 100


def _check_syntax(expression: str) -> str | None:
    """Return a diagnostic for unbalanced parentheses or quotes, else None."""
    depth = 0
    quote: str | None = None
    for position, char in enumerate(expression):
        if quote is not None:
            if char == quote:
                quote = None
            continue
        if char in QUOTE_CHARS:
            quote = char
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return f"unmatched ')' at position {position}"
    if quote is not None:
        return "unterminated quoted literal"
    if depth:
        return f"{depth} unclosed '('"
    return None


class InMemoryTransport(SubscriptionTransport):
    """
    In-memory transport for subscription options.

    Rejects a content filter when:
    - the expression is empty or blank
    - more than 100 parameters are supplied
    - parentheses or quoted literals are unbalanced
    - a ``%N`` placeholder has no matching parameter
    - content filtering is disabled for this transport

    Args:
        supports_content_filter: Whether the simulated middleware supports
            content filtering (default True)

    Example:
        >>> transport = InMemoryTransport()
        >>> record = transport.get_default_options()
        >>> transport.set_content_filter(record, "x > %1", ("5",))
        Traceback (most recent call last):
        ...
        suboptions.exceptions.TransportError: placeholder %1 has no parameter (1 supplied)
    """

    def __init__(self, supports_content_filter: bool = True) -> None:
        self._supports_content_filter = supports_content_filter
        self.content_filter_calls = 0

    @property
    def supports_content_filter(self) -> bool:
        return self._supports_content_filter

    def get_default_options(self) -> TransportOptionsRecord:
        return TransportOptionsRecord()

    def set_content_filter(
        self,
        record: TransportOptionsRecord,
        expression: str,
        parameters: Sequence[str],
    ) -> None:
        self.content_filter_calls += 1

        if not self._supports_content_filter:
            raise TransportError("content filtering is not supported by this middleware")
        if not expression.strip():
            raise TransportError("filter expression must not be empty")
        if len(parameters) > MAX_EXPRESSION_PARAMETERS:
            raise TransportError(
                f"too many expression parameters: {len(parameters)} "
                f"(maximum {MAX_EXPRESSION_PARAMETERS})"
            )

        syntax_error = _check_syntax(expression)
        if syntax_error is not None:
            raise TransportError(f"malformed filter expression: {syntax_error}")

        for index in placeholder_indices(expression):
            if index >= len(parameters):
                raise TransportError(
                    f"placeholder %{index} has no parameter ({len(parameters)} supplied)"
                )

        record.middleware_options.content_filter = TransportContentFilterOptions(
            filter_expression=expression,
            expression_parameters=tuple(parameters),
        )
        logger.debug(
            "Content filter set",
            extra={"filter_expression": expression, "parameter_count": len(parameters)},
        )
