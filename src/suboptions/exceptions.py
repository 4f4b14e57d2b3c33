"""Library exceptions for the suboptions package."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from suboptions.transport.interface import TransportOptionsRecord


class SubscriptionOptionsError(Exception):
    """Base exception for suboptions library."""

    pass


class TransportError(SubscriptionOptionsError):
    """Raised by a transport when it rejects a request."""

    def __init__(self, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(diagnostic)


class InvalidAllocatorError(SubscriptionOptionsError, TypeError):
    """
    Raised when an allocator type cannot back subscription storage.

    Subscription allocators must hand out untyped storage, which is declared
    by setting the class attribute ``value_type`` to ``None``.
    """

    def __init__(self, allocator_type: type[Any], value_type: Any) -> None:
        self.allocator_type = allocator_type
        self.value_type = value_type
        super().__init__(
            f"Subscription allocator {allocator_type.__name__} must allocate raw storage "
            f"(value_type=None), got value_type={value_type!r}"
        )


class AllocatorInUseError(SubscriptionOptionsError, AttributeError):
    """
    Raised when an allocator setting is changed after an allocator was handed out.

    Options keep returning the same allocator for their whole lifetime, so
    ``allocator`` and ``allocator_type`` are frozen from the first
    ``get_allocator()`` or translation on.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Cannot assign to {field_name!r}: the allocator for these options is already in use"
        )


class UnsupportedOptionsError(SubscriptionOptionsError, TypeError):
    """Raised when translation is given options without an allocator layer."""

    def __init__(self, options_type: type[Any]) -> None:
        self.options_type = options_type
        super().__init__(
            f"Cannot translate {options_type.__name__}; wrap it with "
            f"SubscriptionOptions.from_base() first"
        )


class TranslationError(SubscriptionOptionsError):
    """Base exception for failures while building transport options."""

    pass


class AllocationFailureError(TranslationError):
    """Raised when the default allocator instance cannot be constructed."""

    def __init__(self, allocator_type: type[Any], reason: str) -> None:
        self.allocator_type = allocator_type
        self.reason = reason
        super().__init__(f"Failed to construct default allocator {allocator_type.__name__}: {reason}")


class InvalidContentFilterError(TranslationError):
    """
    Raised when the transport rejects a content filter expression.

    Attributes:
        expression: The filter expression that was rejected
        diagnostic: The transport's explanation
        partial_record: The record as it stood when the transport rejected the
            filter. Useful for diagnostics only; it must not be used to create
            a subscription.
    """

    def __init__(
        self,
        expression: str,
        diagnostic: str,
        partial_record: TransportOptionsRecord | None = None,
    ) -> None:
        self.expression = expression
        self.diagnostic = diagnostic
        self.partial_record = partial_record
        super().__init__(f"Failed to set content filter {expression!r}: {diagnostic}")


class InvalidStatisticsPeriodError(TranslationError):
    """Raised when topic statistics are enabled with a non-positive publish period."""

    def __init__(self, publish_period: timedelta) -> None:
        self.publish_period = publish_period
        super().__init__(
            f"Topic statistics publish_period must be positive when statistics are enabled, "
            f"got {publish_period}"
        )


__all__ = [
    "SubscriptionOptionsError",
    "TransportError",
    "InvalidAllocatorError",
    "AllocatorInUseError",
    "UnsupportedOptionsError",
    "TranslationError",
    "AllocationFailureError",
    "InvalidContentFilterError",
    "InvalidStatisticsPeriodError",
]
