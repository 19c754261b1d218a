"""Deterministic random numbers, a bump-pointer heap and float comparisons."""

from __future__ import annotations

from dataclasses import dataclass

RAND_MAX = (1 << 15) - 1
VERIFY_DOUBLE_EPS = 1.0e-13
VERIFY_FLOAT_EPS = 1.0e-5

_SEED_MASK = (1 << 31) - 1
_MAX_SEED = 0xFFFFFFFF


class Random:
    """Linear congruential generator yielding values in [0, RAND_MAX].

    The multiplier and increment are fixed so that every platform produces
    the same sequence for the same seed.
    """

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, new_seed: int) -> None:
        """Restart the sequence from ``new_seed`` (an unsigned 32-bit value)."""
        if not 0 <= new_seed <= _MAX_SEED:
            raise ValueError(f"seed must be in [0, {_MAX_SEED}], got {new_seed}")
        self._state = new_seed

    def rand(self) -> int:
        """Return the next value of the sequence."""
        self._state = (self._state * 1103515245 + 12345) & _SEED_MASK
        return self._state >> 16


@dataclass(frozen=True)
class Allocation:
    """A block handed out by a :class:`Heap`: its offset and requested size."""

    offset: int
    size: int


class Heap:
    """A fixed-size arena that hands out aligned blocks and never reclaims them.

    The arena's first byte is taken to be suitably aligned. Every request,
    including the padding added to keep the next block aligned, is counted,
    so :meth:`is_within_limits` reports whether any request ever exceeded
    the arena since the last :meth:`reset`.
    """

    def __init__(self, size: int, alignment: int = 8) -> None:
        if size < 0:
            raise ValueError(f"heap size must not be negative, got {size}")
        if alignment <= 0:
            raise ValueError(f"alignment must be positive, got {alignment}")
        self.size = size
        self.alignment = alignment
        self._memory = bytearray(size)
        self._next = 0
        self._requested = 0

    @property
    def requested(self) -> int:
        """Bytes requested, padding included, since the last reset."""
        return self._requested

    def reset(self) -> None:
        """Forget every allocation and start handing out from the beginning."""
        self._next = 0
        self._requested = 0

    def allocate(self, size: int) -> Allocation:
        """Reserve ``size`` bytes; raise MemoryError if the arena is exhausted."""
        if size <= 0:
            raise ValueError(f"allocation size must be positive, got {size}")
        next_offset = self._next + size
        self._requested += size
        padding = -next_offset % self.alignment
        next_offset += padding
        self._requested += padding
        if next_offset > self.size:
            raise MemoryError(
                f"cannot allocate {size} bytes: heap of {self.size} bytes exhausted"
            )
        allocation = Allocation(self._next, size)
        self._next = next_offset
        return allocation

    def allocate_zeroed(self, count: int, size: int) -> Allocation:
        """Reserve ``count * size`` bytes and fill them with zeros."""
        allocation = self.allocate(count * size)
        self._memory[allocation.offset : allocation.offset + allocation.size] = bytes(
            allocation.size
        )
        return allocation

    def reallocate(self, allocation: Allocation | None, size: int) -> Allocation:
        """Reserve a new block of ``size`` bytes and copy the old contents in.

        Exactly ``size`` bytes are copied from the start of the old block,
        whatever its own size was.
        """
        if allocation is None:
            raise ValueError("cannot reallocate a missing allocation")
        self._check(allocation)
        new = self.allocate(size)
        data = bytes(self._memory[allocation.offset : allocation.offset + size])
        self._memory[new.offset : new.offset + size] = data
        return new

    def free(self, allocation: Allocation) -> None:
        """Release a block; memory is never reclaimed, so this only validates it."""
        self._check(allocation)

    def view(self, allocation: Allocation) -> memoryview:
        """Return a writable view of the bytes of ``allocation``."""
        self._check(allocation)
        return memoryview(self._memory)[
            allocation.offset : allocation.offset + allocation.size
        ]

    def is_within_limits(self) -> bool:
        """True if no request since the last reset went past the arena."""
        return self._requested <= self.size

    def _check(self, allocation: Allocation) -> None:
        if allocation.offset < 0 or allocation.offset + allocation.size > self.size:
            raise ValueError(f"{allocation!r} does not belong to this heap")


def float_eq(expected: float, actual: float) -> bool:
    """Compare single-precision results within VERIFY_FLOAT_EPS."""
    return abs(expected - actual) < VERIFY_FLOAT_EPS


def double_eq(expected: float, actual: float) -> bool:
    """Compare double-precision results within VERIFY_DOUBLE_EPS."""
    return abs(expected - actual) < VERIFY_DOUBLE_EPS