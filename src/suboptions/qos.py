"""
Quality-of-service profiles for subscriptions.

The translator treats a ``QoSProfile`` as an opaque input: the only thing it
does with one is ask it to resolve itself into the transport's native shape
via ``to_transport_profile()``.

This module also holds ``QosOverridingOptions``, which subscriptions carry
through to the transport record without interpreting.

Example:
    >>> from suboptions.qos import QoSProfile, ReliabilityPolicy
    >>>
    >>> qos = QoSProfile(depth=5, reliability=ReliabilityPolicy.BEST_EFFORT)
    >>> qos.to_transport_profile().depth
    5
    >>> QoSProfile.from_preset("sensor_data") == QoSProfile.sensor_data()
    True
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HistoryPolicy(Enum):
    """How many samples the middleware keeps per instance."""

    SYSTEM_DEFAULT = "system_default"
    KEEP_LAST = "keep_last"
    KEEP_ALL = "keep_all"


class ReliabilityPolicy(Enum):
    """Delivery guarantee requested from the middleware."""

    SYSTEM_DEFAULT = "system_default"
    RELIABLE = "reliable"
    BEST_EFFORT = "best_effort"


class DurabilityPolicy(Enum):
    """Whether late-joining subscriptions receive previously published samples."""

    SYSTEM_DEFAULT = "system_default"
    TRANSIENT_LOCAL = "transient_local"
    VOLATILE = "volatile"


class LivelinessPolicy(Enum):
    """How publisher liveliness is asserted."""

    SYSTEM_DEFAULT = "system_default"
    AUTOMATIC = "automatic"
    MANUAL_BY_TOPIC = "manual_by_topic"


class QosPolicyKind(Enum):
    """QoS policies that can be exposed for overriding via parameters."""

    AVOID_ROS_NAMESPACE_CONVENTIONS = "avoid_ros_namespace_conventions"
    DEADLINE = "deadline"
    DEPTH = "depth"
    DURABILITY = "durability"
    HISTORY = "history"
    LEASE_DURATION = "liveliness_lease_duration"
    LIFESPAN = "lifespan"
    LIVELINESS = "liveliness"
    RELIABILITY = "reliability"


def _to_nanoseconds(value: timedelta) -> int:
    # timedelta stores microseconds, so integer math keeps this exact
    return ((value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds) * 1_000


@dataclass(frozen=True)
class TransportQosProfile:
    """
    QoS profile in the transport's native shape.

    Durations are integer nanoseconds; zero means the middleware default
    (effectively infinite for deadline, lifespan and lease duration).
    """

    history: HistoryPolicy
    depth: int
    reliability: ReliabilityPolicy
    durability: DurabilityPolicy
    deadline_ns: int
    lifespan_ns: int
    liveliness: LivelinessPolicy
    liveliness_lease_duration_ns: int
    avoid_ros_namespace_conventions: bool


class QoSProfile(BaseModel):
    """
    Quality-of-service settings for a subscription.

    Attributes:
        history: Sample history policy
        depth: Queue depth, used when history is KEEP_LAST
        reliability: Reliability policy
        durability: Durability policy
        deadline: Expected maximum period between samples (zero = unspecified)
        lifespan: Maximum sample age before it is dropped (zero = unspecified)
        liveliness: Liveliness assertion policy
        liveliness_lease_duration: Lease for liveliness assertions (zero = unspecified)
        avoid_ros_namespace_conventions: Use the raw topic name on the wire
    """

    model_config = ConfigDict(frozen=True)

    history: HistoryPolicy = HistoryPolicy.KEEP_LAST
    depth: int = Field(default=10, ge=0)
    reliability: ReliabilityPolicy = ReliabilityPolicy.RELIABLE
    durability: DurabilityPolicy = DurabilityPolicy.VOLATILE
    deadline: timedelta = timedelta(0)
    lifespan: timedelta = timedelta(0)
    liveliness: LivelinessPolicy = LivelinessPolicy.SYSTEM_DEFAULT
    liveliness_lease_duration: timedelta = timedelta(0)
    avoid_ros_namespace_conventions: bool = False

    @field_validator("deadline", "lifespan", "liveliness_lease_duration")
    @classmethod
    def _non_negative_duration(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError(f"QoS durations must not be negative, got {value}")
        return value

    @model_validator(mode="after")
    def _keep_last_needs_depth(self) -> Self:
        if self.history is HistoryPolicy.KEEP_LAST and self.depth == 0:
            raise ValueError("QoS depth must be at least 1 when history is KEEP_LAST")
        return self

    @classmethod
    def default(cls) -> QoSProfile:
        """Reliable, volatile, keep last 10."""
        return cls()

    @classmethod
    def sensor_data(cls) -> QoSProfile:
        """Best effort with a short queue, for high-rate sensor streams."""
        return cls(depth=5, reliability=ReliabilityPolicy.BEST_EFFORT)

    @classmethod
    def system_default(cls) -> QoSProfile:
        """Defer every policy to the middleware."""
        return cls(
            history=HistoryPolicy.SYSTEM_DEFAULT,
            depth=0,
            reliability=ReliabilityPolicy.SYSTEM_DEFAULT,
            durability=DurabilityPolicy.SYSTEM_DEFAULT,
        )

    @classmethod
    def services(cls) -> QoSProfile:
        return cls()

    @classmethod
    def parameters(cls) -> QoSProfile:
        return cls(depth=1000)

    @classmethod
    def from_preset(cls, name: str) -> QoSProfile:
        """
        Build a profile from a preset name.

        Args:
            name: One of "default", "sensor_data", "system_default",
                "services", "parameters"

        Raises:
            ValueError: If the preset name is unknown
        """
        factory = _PRESETS.get(name)
        if factory is None:
            raise ValueError(f"Unknown QoS preset {name!r}; expected one of {sorted(_PRESETS)}")
        return factory()

    def to_transport_profile(self) -> TransportQosProfile:
        """Resolve this profile into the transport's native shape."""
        return TransportQosProfile(
            history=self.history,
            depth=self.depth,
            reliability=self.reliability,
            durability=self.durability,
            deadline_ns=_to_nanoseconds(self.deadline),
            lifespan_ns=_to_nanoseconds(self.lifespan),
            liveliness=self.liveliness,
            liveliness_lease_duration_ns=_to_nanoseconds(self.liveliness_lease_duration),
            avoid_ros_namespace_conventions=self.avoid_ros_namespace_conventions,
        )


_PRESETS: dict[str, Callable[[], QoSProfile]] = {
    "default": QoSProfile.default,
    "sensor_data": QoSProfile.sensor_data,
    "system_default": QoSProfile.system_default,
    "services": QoSProfile.services,
    "parameters": QoSProfile.parameters,
}


# Callback that validates a proposed QoS override; returns (accepted, reason)
QosOverridingCallback = Callable[[QoSProfile], Any]


@dataclass(frozen=True)
class QosOverridingOptions:
    """
    Which QoS policies may be overridden through parameters.

    Carried through translation untouched; the component that declares the
    override parameters owns these semantics.

    Attributes:
        policy_kinds: Policies exposed for overriding
        validation_callback: Optional check applied to the overridden profile
        id: Disambiguates several entities on the same topic
    """

    policy_kinds: tuple[QosPolicyKind, ...] = ()
    validation_callback: QosOverridingCallback | None = None
    id: str = ""

    @classmethod
    def with_default_policies(
        cls,
        validation_callback: QosOverridingCallback | None = None,
        id: str = "",
    ) -> QosOverridingOptions:
        """Expose history, depth and reliability for overriding."""
        return cls(
            policy_kinds=(QosPolicyKind.HISTORY, QosPolicyKind.DEPTH, QosPolicyKind.RELIABILITY),
            validation_callback=validation_callback,
            id=id,
        )


__all__ = [
    "HistoryPolicy",
    "ReliabilityPolicy",
    "DurabilityPolicy",
    "LivelinessPolicy",
    "QosPolicyKind",
    "QoSProfile",
    "TransportQosProfile",
    "QosOverridingOptions",
    "QosOverridingCallback",
]
