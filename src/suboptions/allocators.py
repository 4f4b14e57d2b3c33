"""
Allocators for subscription storage.

Subscriptions may be given a custom allocator. When none is supplied a
default one is created on first use and kept for the lifetime of the
options, so every query returns the same instance. The transport may keep
an allocator view for as long as the subscription lives; handing out a
fresh allocator on every query would leave that view pointing at an
allocator nobody else uses.

This module provides:
- Allocator: Protocol for allocator capabilities
- DefaultAllocator: bytearray-backed allocator used when none is supplied
- RawAllocatorView: untyped view over an allocator, shared with the transport
- TransportAllocator: the allocator shape stored in transport options
- AllocatorResolver: resolves the user or default allocator with stable identity

Example:
    >>> resolver = AllocatorResolver(DefaultAllocator)
    >>> resolver.resolve() is resolver.resolve()
    True
    >>> block = resolver.transport_allocator().allocate(16)
    >>> len(block)
    16
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from suboptions.exceptions import AllocationFailureError, InvalidAllocatorError

logger = logging.getLogger(__name__)


@runtime_checkable
class Allocator(Protocol):
    """
    Protocol for subscription allocators.

    Implementations must declare ``value_type = None`` to signal that they
    hand out untyped storage. Blocks are ``bytearray`` objects.
    """

    value_type: ClassVar[type[Any] | None]

    def allocate(self, size: int) -> bytearray:
        """Allocate a zero-filled block of ``size`` bytes."""
        ...

    def deallocate(self, block: bytearray) -> None:
        """Release a block previously returned by this allocator."""
        ...

    def reallocate(self, block: bytearray, size: int) -> bytearray:
        """Resize a block, preserving its leading contents."""
        ...


TAllocator = TypeVar("TAllocator", bound=Allocator)


class DefaultAllocator:
    """Allocator backed by Python ``bytearray`` objects."""

    value_type: ClassVar[type[Any] | None] = None

    def allocate(self, size: int) -> bytearray:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        return bytearray(size)

    def deallocate(self, block: bytearray) -> None:
        # bytearray storage is reclaimed by the garbage collector
        pass

    def reallocate(self, block: bytearray, size: int) -> bytearray:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        resized = bytearray(size)
        keep = min(len(block), size)
        resized[:keep] = block[:keep]
        return resized


class RawAllocatorView:
    """
    Untyped view over an allocator.

    Holds a strong reference to the underlying allocator, so anything that
    keeps the view keeps the allocator alive.
    """

    def __init__(self, allocator: Allocator) -> None:
        self._allocator = allocator

    @property
    def allocator(self) -> Allocator:
        return self._allocator

    def allocate(self, size: int) -> bytearray:
        return self._allocator.allocate(size)

    def deallocate(self, block: bytearray) -> None:
        self._allocator.deallocate(block)

    def reallocate(self, block: bytearray, size: int) -> bytearray:
        return self._allocator.reallocate(block, size)

    def zero_allocate(self, count: int, element_size: int) -> bytearray:
        block = self._allocator.allocate(count * element_size)
        block[:] = bytes(len(block))
        return block

    def __repr__(self) -> str:
        return f"RawAllocatorView({self._allocator!r})"


@dataclass(frozen=True)
class TransportAllocator:
    """
    Allocator in the shape the transport stores in its options.

    The ``state`` view is shared by identity, so two transport allocators
    built from the same resolver compare equal.
    """

    state: RawAllocatorView

    def allocate(self, size: int) -> bytearray:
        return self.state.allocate(size)

    def deallocate(self, block: bytearray) -> None:
        self.state.deallocate(block)

    def reallocate(self, block: bytearray, size: int) -> bytearray:
        return self.state.reallocate(block, size)

    def zero_allocate(self, count: int, element_size: int) -> bytearray:
        return self.state.zero_allocate(count, element_size)


def check_allocator_type(allocator_type: type[Any]) -> None:
    """
    Check that an allocator type hands out untyped storage.

    Raises:
        InvalidAllocatorError: If ``value_type`` is missing or not None
    """
    missing = object()
    value_type = getattr(allocator_type, "value_type", missing)
    if value_type is not None:
        raise InvalidAllocatorError(
            allocator_type, "<missing>" if value_type is missing else value_type
        )


class AllocatorResolver(Generic[TAllocator]):
    """
    Resolves the allocator for one set of subscription options.

    If a user allocator is supplied it is always returned as-is and no
    default is ever created. Otherwise a default instance is built on the
    first ``resolve()`` and cached; it is never replaced afterwards.

    Not thread-safe: callers sharing one resolver across threads must
    serialize the first ``resolve()`` themselves.

    Args:
        allocator_type: Allocator class used to build the default instance
        allocator: Optional user-supplied allocator

    Raises:
        InvalidAllocatorError: If ``allocator_type`` or the user allocator does
            not allocate raw storage
    """

    def __init__(
        self,
        allocator_type: type[TAllocator],
        allocator: TAllocator | None = None,
    ) -> None:
        check_allocator_type(allocator_type)
        if allocator is not None:
            check_allocator_type(type(allocator))
        self._allocator_type = allocator_type
        self._user_allocator = allocator
        self._materialized_default: TAllocator | None = None
        self._raw_view: RawAllocatorView | None = None
        self._resolved = False

    @property
    def allocator_type(self) -> type[TAllocator]:
        return self._allocator_type

    @property
    def user_allocator(self) -> TAllocator | None:
        return self._user_allocator

    @property
    def materialized_default(self) -> TAllocator | None:
        """The cached default allocator, or None if none has been created."""
        return self._materialized_default

    @property
    def resolved(self) -> bool:
        """True once an allocator has been handed out by this resolver."""
        return self._resolved

    def resolve(self) -> TAllocator:
        """
        Return the allocator for these options.

        Returns:
            The user allocator if one was supplied, otherwise the cached default

        Raises:
            AllocationFailureError: If the default allocator cannot be constructed
        """
        if self._user_allocator is not None:
            self._resolved = True
            return self._user_allocator
        if self._materialized_default is None:
            try:
                instance = self._allocator_type()
            except Exception as e:
                raise AllocationFailureError(self._allocator_type, str(e)) from e
            self._materialized_default = instance
            logger.debug(
                "Materialized default allocator",
                extra={"allocator_type": self._allocator_type.__name__},
            )
        self._resolved = True
        return self._materialized_default

    def raw_view(self) -> RawAllocatorView:
        """Return the untyped view over the resolved allocator, created once."""
        if self._raw_view is None:
            self._raw_view = RawAllocatorView(self.resolve())
        return self._raw_view

    def transport_allocator(self) -> TransportAllocator:
        """Return the allocator in the transport's shape."""
        return TransportAllocator(state=self.raw_view())


__all__ = [
    "Allocator",
    "TAllocator",
    "DefaultAllocator",
    "RawAllocatorView",
    "TransportAllocator",
    "AllocatorResolver",
    "check_allocator_type",
]
