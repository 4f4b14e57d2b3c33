"""
Subscription options.

This module provides:
- TopicStatisticsOptions: Topic statistics settings, carried through untouched
- SubscriptionOptionsBase: Allocator-independent subscription options
- SubscriptionOptions: Options with an allocator, translatable to transport options

Values are accepted as-is. Nothing is validated until the options are
translated, so an invalid statistics period only surfaces from
``to_transport_options()``.

Example:
    >>> from suboptions import QoSProfile, SubscriptionOptions
    >>>
    >>> options = SubscriptionOptions()
    >>> options.content_filter_options.filter_expression = "data > %0"
    >>> options.content_filter_options.expression_parameters = ["10"]
    >>> record = options.to_transport_options(QoSProfile())
    >>> record.middleware_options.content_filter.filter_expression
    'data > %0'
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Generic

from suboptions.allocators import (
    AllocatorResolver,
    DefaultAllocator,
    TAllocator,
    TransportAllocator,
)
from suboptions.content_filter import ContentFilterOptions
from suboptions.events import SubscriptionEventCallbacks
from suboptions.exceptions import AllocatorInUseError
from suboptions.payload import SubscriptionPayload
from suboptions.qos import QosOverridingOptions, QoSProfile
from suboptions.types import (
    CallbackGroupRef,
    IntraProcessBufferType,
    IntraProcessSetting,
    TopicStatisticsState,
    UniqueNetworkFlowEndpointsRequirement,
)

if TYPE_CHECKING:
    from suboptions.transport.interface import SubscriptionTransport, TransportOptionsRecord

_ALLOCATOR_FIELDS = frozenset({"allocator", "allocator_type"})


@dataclass
class TopicStatisticsOptions:
    """
    Topic statistics settings for a subscription.

    Attributes:
        state: Whether statistics are collected (defaults to the node setting)
        publish_topic: Topic statistics are published on
        publish_period: Publication period; must be positive when enabled
    """

    state: TopicStatisticsState = TopicStatisticsState.NODE_DEFAULT
    publish_topic: str = "/statistics"
    publish_period: timedelta = timedelta(seconds=1)


@dataclass
class SubscriptionOptionsBase:
    """
    Allocator-independent options for a subscription.

    ``use_default_callbacks`` is never derived from ``event_callbacks``:
    supplying callbacks leaves default callbacks installed unless the caller
    sets ``use_default_callbacks = False`` as well.

    Attributes:
        event_callbacks: Callbacks for middleware events
        use_default_callbacks: Install default callbacks for unset events
        ignore_local_publications: Ignore samples published from the same context
        require_unique_network_flow_endpoints: Unique network flow requirement
        callback_group: Callback group; None uses the node's default group
        use_intra_process_comm: Intra-process communication setting
        intra_process_buffer_type: Data type stored in the intra-process buffer
        middleware_payload: Optional middleware-specific payload
        topic_stats_options: Topic statistics settings
        qos_overriding_options: QoS policies exposed for overriding
        content_filter_options: Content filter expression and parameters
    """

    event_callbacks: SubscriptionEventCallbacks = field(
        default_factory=SubscriptionEventCallbacks
    )
    use_default_callbacks: bool = True
    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )
    callback_group: CallbackGroupRef | None = None
    use_intra_process_comm: IntraProcessSetting = IntraProcessSetting.NODE_DEFAULT
    intra_process_buffer_type: IntraProcessBufferType = IntraProcessBufferType.CALLBACK_DEFAULT
    middleware_payload: SubscriptionPayload | None = None
    topic_stats_options: TopicStatisticsOptions = field(default_factory=TopicStatisticsOptions)
    qos_overriding_options: QosOverridingOptions = field(default_factory=QosOverridingOptions)
    content_filter_options: ContentFilterOptions = field(default_factory=ContentFilterOptions)


@dataclass
class SubscriptionOptions(SubscriptionOptionsBase, Generic[TAllocator]):
    """
    Subscription options with an optional custom allocator.

    When ``allocator`` is None a default ``allocator_type`` instance is
    created on first use and reused for the lifetime of these options.
    ``allocator`` and ``allocator_type`` may be reassigned until an allocator
    has been handed out; after that they are fixed.

    Attributes:
        allocator: Optional user-supplied allocator
        allocator_type: Allocator class used for the default instance

    Raises:
        InvalidAllocatorError: If ``allocator_type`` or ``allocator`` does not
            allocate raw storage
        AllocatorInUseError: If an allocator field is assigned after the
            allocator was handed out
    """

    allocator: TAllocator | None = None
    allocator_type: type[Any] = DefaultAllocator
    _resolver: AllocatorResolver[TAllocator] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._resolver = AllocatorResolver(self.allocator_type, self.allocator)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _ALLOCATOR_FIELDS and "_resolver" in self.__dict__:
            if self._resolver.resolved:
                raise AllocatorInUseError(name)
            allocator = value if name == "allocator" else self.allocator
            allocator_type = value if name == "allocator_type" else self.allocator_type
            resolver = AllocatorResolver(allocator_type, allocator)
            super().__setattr__(name, value)
            super().__setattr__("_resolver", resolver)
            return
        super().__setattr__(name, value)

    @classmethod
    def from_base(
        cls,
        base: SubscriptionOptionsBase,
        allocator: Any | None = None,
        allocator_type: type[Any] = DefaultAllocator,
    ) -> SubscriptionOptions[Any]:
        """
        Layer an allocator over existing base options.

        Value blocks (event callbacks, topic statistics and content filter)
        are copied, so later changes to ``base`` do not reach the new options.
        The callback group, middleware payload and QoS overriding options are
        shared with ``base``.

        Args:
            base: Options to copy
            allocator: Optional user-supplied allocator
            allocator_type: Allocator class used for the default instance

        Returns:
            New SubscriptionOptions
        """
        values = {f.name: getattr(base, f.name) for f in fields(SubscriptionOptionsBase)}
        values["event_callbacks"] = replace(base.event_callbacks)
        values["topic_stats_options"] = replace(base.topic_stats_options)
        values["content_filter_options"] = replace(
            base.content_filter_options,
            expression_parameters=list(base.content_filter_options.expression_parameters),
        )
        return cls(**values, allocator=allocator, allocator_type=allocator_type)

    @property
    def allocator_resolver(self) -> AllocatorResolver[TAllocator]:
        """Resolver backing these options; fixed once an allocator is handed out."""
        return self._resolver

    def get_allocator(self) -> TAllocator:
        """
        Return the allocator, creating the default instance if needed.

        Raises:
            AllocationFailureError: If the default allocator cannot be constructed
        """
        return self.allocator_resolver.resolve()

    def get_transport_allocator(self) -> TransportAllocator:
        """Return the allocator in the transport's shape."""
        return self.allocator_resolver.transport_allocator()

    def to_transport_options(
        self,
        qos: QoSProfile,
        transport: SubscriptionTransport | None = None,
    ) -> TransportOptionsRecord:
        """
        Translate these options into a transport options record.

        Args:
            qos: QoS profile for the subscription
            transport: Transport to build the record for (in-memory by default)

        Returns:
            The finished record

        Raises:
            TranslationError: If the options cannot be translated
        """
        from suboptions.translator import translate

        return translate(self, qos, transport=transport)


__all__ = [
    "TopicStatisticsOptions",
    "SubscriptionOptionsBase",
    "SubscriptionOptions",
]
