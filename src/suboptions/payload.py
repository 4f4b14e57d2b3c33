"""
Middleware-specific payloads for subscription creation.

A payload lets code written for one middleware backend tune transport
options that the generic options do not expose. Backends subclass
``SubscriptionPayload``, set ``implementation_identifier``, and override
``modify_transport_options``.

Example:
    >>> class FastDDSPayload(SubscriptionPayload):
    ...     implementation_identifier = "rmw_fastrtps_cpp"
    ...
    ...     def __init__(self, history_memory_policy: str) -> None:
    ...         self.history_memory_policy = history_memory_policy
    ...
    ...     def modify_transport_options(self, options):
    ...         options.implementation_payload = {
    ...             "history_memory_policy": self.history_memory_policy,
    ...         }
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from suboptions.transport.interface import MiddlewareSubscriptionOptions


class SubscriptionPayload:
    """
    Base class for middleware-specific subscription payloads.

    The base class is "not customized": it has no implementation identifier
    and its hook does nothing. The translator only calls
    ``modify_transport_options`` on payloads that report themselves as
    customized.
    """

    implementation_identifier: ClassVar[str | None] = None

    def has_been_customized(self) -> bool:
        """Return True if this payload targets a specific middleware."""
        return self.implementation_identifier is not None

    def modify_transport_options(self, options: MiddlewareSubscriptionOptions) -> None:
        """Apply middleware-specific changes to the in-progress options."""
        pass


def customized_payload(payload: SubscriptionPayload | None) -> SubscriptionPayload | None:
    """
    Select the payload to apply, if any.

    Returns:
        The payload when it is present and customized, otherwise None
    """
    if payload is not None and payload.has_been_customized():
        return payload
    return None


__all__ = ["SubscriptionPayload", "customized_payload"]
