"""
suboptions - Subscription options for pub/sub transports.

This library provides:
- Subscription options with defaults and an optional custom allocator
- Allocator resolution with stable identity across queries
- Translation of options and a QoS profile into a transport options record
- Content filter and middleware payload support
- An in-memory reference transport
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("suboptions-py")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from suboptions.allocators import (
    Allocator,
    AllocatorResolver,
    DefaultAllocator,
    RawAllocatorView,
    TransportAllocator,
)
from suboptions.content_filter import ContentFilterOptions
from suboptions.events import SubscriptionEventCallbacks
from suboptions.exceptions import (
    AllocationFailureError,
    AllocatorInUseError,
    InvalidAllocatorError,
    InvalidContentFilterError,
    InvalidStatisticsPeriodError,
    SubscriptionOptionsError,
    TranslationError,
    TransportError,
    UnsupportedOptionsError,
)
from suboptions.options import (
    SubscriptionOptions,
    SubscriptionOptionsBase,
    TopicStatisticsOptions,
)
from suboptions.payload import SubscriptionPayload, customized_payload
from suboptions.qos import (
    DurabilityPolicy,
    HistoryPolicy,
    LivelinessPolicy,
    QosOverridingOptions,
    QosPolicyKind,
    QoSProfile,
    ReliabilityPolicy,
    TransportQosProfile,
)
from suboptions.translator import OptionsTranslator, translate
from suboptions.transport import (
    InMemoryTransport,
    MiddlewareSubscriptionOptions,
    SubscriptionTransport,
    TransportContentFilterOptions,
    TransportOptionsRecord,
)
from suboptions.types import (
    IntraProcessBufferType,
    IntraProcessSetting,
    TopicStatisticsState,
    UniqueNetworkFlowEndpointsRequirement,
)

__all__ = [
    "__version__",
    # Options
    "SubscriptionOptionsBase",
    "SubscriptionOptions",
    "TopicStatisticsOptions",
    "ContentFilterOptions",
    "SubscriptionEventCallbacks",
    "SubscriptionPayload",
    "customized_payload",
    # Flags
    "UniqueNetworkFlowEndpointsRequirement",
    "IntraProcessSetting",
    "IntraProcessBufferType",
    "TopicStatisticsState",
    # QoS
    "QoSProfile",
    "TransportQosProfile",
    "HistoryPolicy",
    "ReliabilityPolicy",
    "DurabilityPolicy",
    "LivelinessPolicy",
    "QosPolicyKind",
    "QosOverridingOptions",
    # Allocators
    "Allocator",
    "AllocatorResolver",
    "DefaultAllocator",
    "RawAllocatorView",
    "TransportAllocator",
    # Translation
    "OptionsTranslator",
    "translate",
    # Transport
    "SubscriptionTransport",
    "TransportOptionsRecord",
    "MiddlewareSubscriptionOptions",
    "TransportContentFilterOptions",
    "InMemoryTransport",
    # Exceptions
    "SubscriptionOptionsError",
    "TranslationError",
    "AllocationFailureError",
    "InvalidContentFilterError",
    "InvalidStatisticsPeriodError",
    "InvalidAllocatorError",
    "AllocatorInUseError",
    "UnsupportedOptionsError",
    "TransportError",
]
