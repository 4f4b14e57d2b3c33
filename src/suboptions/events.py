"""Event callback hooks for subscriptions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any

# Each hook receives the middleware's status object for the event.
EventCallback = Callable[[Any], None]


@dataclass
class SubscriptionEventCallbacks:
    """
    Callbacks for middleware events on a subscription.

    Setting a callback here does not turn off default callbacks. Callers who
    want only their own handlers must also set
    ``use_default_callbacks = False`` on the options.

    Attributes:
        deadline_callback: Requested deadline was missed
        liveliness_callback: A matched publisher's liveliness changed
        incompatible_qos_callback: A publisher with incompatible QoS was found
        message_lost_callback: Samples were lost before delivery
        incompatible_type_callback: A publisher with an incompatible type was found
        matched_callback: The set of matched publishers changed
    """

    deadline_callback: EventCallback | None = None
    liveliness_callback: EventCallback | None = None
    incompatible_qos_callback: EventCallback | None = None
    message_lost_callback: EventCallback | None = None
    incompatible_type_callback: EventCallback | None = None
    matched_callback: EventCallback | None = None

    def has_callbacks(self) -> bool:
        """Return True if at least one hook is set."""
        return any(getattr(self, f.name) is not None for f in fields(self))


__all__ = ["EventCallback", "SubscriptionEventCallbacks"]
