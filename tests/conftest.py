"""
Shared pytest fixtures for the suboptions library tests.

This module provides:
- Allocator fixtures with reset class-level counters
- Transport fixtures (in_memory_transport, recording_transport)
- QoS and options fixtures
- A MockTracer fixture
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from suboptions import InMemoryTransport, QoSProfile, SubscriptionOptions
from suboptions.observability import MockTracer
from tests.fixtures import CountingAllocator, FlakyAllocator, RecordingTransport


@pytest.fixture(autouse=True)
def reset_allocator_counters() -> Generator[None, None, None]:
    """Reset class-level counters on allocator doubles around each test."""
    CountingAllocator.reset()
    FlakyAllocator.fail = True
    FlakyAllocator.constructed = 0
    yield
    CountingAllocator.reset()
    FlakyAllocator.fail = True
    FlakyAllocator.constructed = 0


@pytest.fixture
def in_memory_transport() -> InMemoryTransport:
    return InMemoryTransport()


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def qos() -> QoSProfile:
    return QoSProfile()


@pytest.fixture
def options() -> SubscriptionOptions:
    return SubscriptionOptions()


@pytest.fixture
def mock_tracer() -> MockTracer:
    return MockTracer()
