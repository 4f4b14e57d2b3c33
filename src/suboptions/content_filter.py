"""
Content filter options for subscriptions.

A content filter lets the middleware drop samples that do not match an
SQL-like expression before they reach the subscription. Expressions refer
to their parameters positionally as ``%0``, ``%1``, and so on.

Example:
    >>> from suboptions.content_filter import ContentFilterOptions, encode_parameters
    >>>
    >>> options = ContentFilterOptions(
    ...     filter_expression="data > %0 AND label = %1",
    ...     expression_parameters=["5", "'left'"],
    ... )
    >>> options.enabled
    True
    >>> encode_parameters(options.expression_parameters)
    ('5', "'left'")
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

PLACEHOLDER_PATTERN = re.compile(r"%(\d+)")

# Quoted literal delimiters
QUOTE_CHARS = ("'", "`")


@dataclass
class ContentFilterOptions:
    """
    Content filter declared on a subscription.

    Attributes:
        filter_expression: Filter expression; empty disables filtering
        expression_parameters: Values substituted for ``%N`` placeholders,
            in order
    """

    filter_expression: str = ""
    expression_parameters: list[str] = field(default_factory=list)

    @property
    def enabled(self) -> bool:
        return bool(self.filter_expression)


def encode_parameters(parameters: Iterable[str]) -> tuple[str, ...]:
    """
    Encode expression parameters into the transport's positional shape.

    Order is preserved and duplicates are kept, so position ``i`` always
    binds placeholder ``%i``.
    """
    return tuple(str(parameter) for parameter in parameters)


def placeholder_indices(expression: str) -> list[int]:
    """
    Return the ``%N`` placeholder indices used by an expression.

    Text inside quoted literals is skipped, so ``name = '%3'`` uses no
    placeholders. An unterminated literal runs to the end of the expression.
    """
    indices: list[int] = []
    quote: str | None = None
    position = 0
    while position < len(expression):
        char = expression[position]
        if quote is not None:
            if char == quote:
                quote = None
        elif char in QUOTE_CHARS:
            quote = char
        else:
            match = PLACEHOLDER_PATTERN.match(expression, position)
            if match is not None:
                indices.append(int(match.group(1)))
                position = match.end()
                continue
        position += 1
    return indices


__all__ = [
    "PLACEHOLDER_PATTERN",
    "QUOTE_CHARS",
    "ContentFilterOptions",
    "encode_parameters",
    "placeholder_indices",
]
