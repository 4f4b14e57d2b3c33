"""Common type definitions for the suboptions library."""

from enum import Enum
from typing import Any, TypeAlias

# Callback groups are scheduled elsewhere; options only hold a shared reference.
CallbackGroupRef: TypeAlias = Any


class UniqueNetworkFlowEndpointsRequirement(Enum):
    """
    Whether the middleware must create unique network flow endpoints.

    Values:
        NOT_REQUIRED: Unique endpoints are not needed (default)
        STRICTLY_REQUIRED: Creation fails if unique endpoints are unavailable
        OPTIONALLY_REQUIRED: Unique endpoints are used when available
    """

    NOT_REQUIRED = "not_required"
    STRICTLY_REQUIRED = "strictly_required"
    OPTIONALLY_REQUIRED = "optionally_required"


class IntraProcessSetting(Enum):
    """Explicit intra-process communication setting for one subscription."""

    ENABLE = "enable"
    DISABLE = "disable"
    NODE_DEFAULT = "node_default"


class IntraProcessBufferType(Enum):
    """
    Kind of reference stored in the intra-process buffer.

    CALLBACK_DEFAULT lets the subscription pick based on its callback signature.
    """

    SHARED = "shared"
    UNIQUE = "unique"
    CALLBACK_DEFAULT = "callback_default"


class TopicStatisticsState(Enum):
    """Topic statistics collection state for one subscription."""

    ENABLE = "enable"
    DISABLE = "disable"
    NODE_DEFAULT = "node_default"
