"""
Shared test fixtures for the suboptions library.

Usage:
    from tests.fixtures import (
        CountingAllocator,
        FailingAllocator,
        RecordingPayload,
        RecordingTransport,
    )
"""

from tests.fixtures.allocators import (
    CountingAllocator,
    FailingAllocator,
    FlakyAllocator,
    TypedAllocator,
    UndeclaredAllocator,
)
from tests.fixtures.payloads import (
    ForcedPayload,
    RecordingPayload,
    RecordingTransport,
    UncustomizedPayload,
)

__all__ = [
    "CountingAllocator",
    "FailingAllocator",
    "FlakyAllocator",
    "TypedAllocator",
    "UndeclaredAllocator",
    "ForcedPayload",
    "RecordingPayload",
    "RecordingTransport",
    "UncustomizedPayload",
]
