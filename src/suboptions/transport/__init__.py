"""
Transport collaborators for suboptions.

Exports:
    SubscriptionTransport: Abstract transport interface
    TransportOptionsRecord: Options record consumed by a transport
    MiddlewareSubscriptionOptions: Middleware-level part of the record
    TransportContentFilterOptions: Content filter as stored by the transport
    InMemoryTransport: In-memory reference transport
"""

from suboptions.transport.interface import (
    MiddlewareSubscriptionOptions,
    SubscriptionTransport,
    TransportContentFilterOptions,
    TransportOptionsRecord,
)
from suboptions.transport.memory import MAX_EXPRESSION_PARAMETERS, InMemoryTransport

__all__ = [
    "SubscriptionTransport",
    "TransportOptionsRecord",
    "MiddlewareSubscriptionOptions",
    "TransportContentFilterOptions",
    "InMemoryTransport",
    "MAX_EXPRESSION_PARAMETERS",
]
