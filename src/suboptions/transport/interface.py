"""Transport interface definitions.

This module contains the SubscriptionTransport abstract base class and the
options record a transport accepts when creating a subscription.

The transport is an external collaborator: it supplies a baseline record,
validates content filters, and later consumes the finished record. The
translator in ``suboptions.translator`` only talks to it through this
interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from suboptions.allocators import TransportAllocator
from suboptions.options import TopicStatisticsOptions
from suboptions.qos import QosOverridingOptions, QoSProfile, TransportQosProfile
from suboptions.types import UniqueNetworkFlowEndpointsRequirement


@dataclass(frozen=True)
class TransportContentFilterOptions:
    """Content filter as stored by the transport."""

    filter_expression: str
    expression_parameters: tuple[str, ...] = ()


@dataclass
class MiddlewareSubscriptionOptions:
    """
    Middleware-level subscription options.

    Attributes:
        ignore_local_publications: Drop samples published from the same context
        require_unique_network_flow_endpoints: Unique network flow requirement
        content_filter: Content filter set by the transport, if any
        implementation_payload: Opaque slot for middleware-specific payload hooks
    """

    ignore_local_publications: bool = False
    require_unique_network_flow_endpoints: UniqueNetworkFlowEndpointsRequirement = (
        UniqueNetworkFlowEndpointsRequirement.NOT_REQUIRED
    )
    content_filter: TransportContentFilterOptions | None = None
    implementation_payload: Any = None


@dataclass
class TransportOptionsRecord:
    """
    Options a transport accepts when creating a subscription.

    Owned by the caller once returned. It does not reference the options it
    was built from; only the allocator view is shared with them.
    """

    qos: TransportQosProfile = field(
        default_factory=lambda: QoSProfile.system_default().to_transport_profile()
    )
    allocator: TransportAllocator | None = None
    middleware_options: MiddlewareSubscriptionOptions = field(
        default_factory=MiddlewareSubscriptionOptions
    )
    topic_stats_options: TopicStatisticsOptions = field(default_factory=TopicStatisticsOptions)
    qos_overriding_options: QosOverridingOptions = field(default_factory=QosOverridingOptions)


class SubscriptionTransport(ABC):
    """
    Abstract transport that consumes subscription options.

    Implementations supply the baseline record and own content filter
    validation, which depends on what the active middleware supports.

    Example:
        >>> transport = InMemoryTransport()
        >>> record = transport.get_default_options()
        >>> transport.set_content_filter(record, "x > %0", ("5",))
        >>> record.middleware_options.content_filter.expression_parameters
        ('5',)
    """

    @abstractmethod
    def get_default_options(self) -> TransportOptionsRecord:
        """
        Return a fresh baseline options record.

        Never fails. Every call returns a new record.
        """
        pass

    @abstractmethod
    def set_content_filter(
        self,
        record: TransportOptionsRecord,
        expression: str,
        parameters: Sequence[str],
    ) -> None:
        """
        Set the content filter on a record.

        Only called with a non-empty expression. The parameters are read
        during the call and not retained.

        Args:
            record: Record to update
            expression: Filter expression using ``%N`` placeholders
            parameters: Positional parameter values

        Raises:
            TransportError: If the transport rejects the filter
        """
        pass
