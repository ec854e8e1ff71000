"""Fixed-capacity slot ring buffer with reject-or-overwrite write modes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from circular_buffer.const import DEFAULT_EVICTION_LOG_INTERVAL
from circular_buffer.exceptions import (
    BufferEmptyError,
    BufferOverflowError,
    InvalidCapacityError,
)
from circular_buffer.sampled_logger import make_sampled_logger

if TYPE_CHECKING:
    from circular_buffer.config import RingBufferConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Marks an unoccupied slot so that None stays a storable value.
_EMPTY: Any = object()


class RingBuffer(Generic[T]):
    """Fixed-capacity ring buffer of slots holding one value each.

    - ``write`` rejects values when every slot is occupied.
    - ``force_write`` evicts the oldest value instead.
    - Not thread-safe: guard the whole buffer with one external lock if it is
      shared between threads.
    """

    def __init__(
        self, capacity: int, *, eviction_log_interval: int | None = None
    ) -> None:
        """Initialize the ring buffer.

        :param capacity: number of slots to allocate
        :type capacity: int
        :param eviction_log_interval: log the first eviction and every Nth one
        :type eviction_log_interval: int | None
        :raises InvalidCapacityError: if capacity is not a positive integer
        :raises ValueError: if eviction_log_interval is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(
                f"capacity must be an int, got {type(capacity).__name__}"
            )
        if capacity <= 0:
            raise InvalidCapacityError(f"capacity must be positive, got {capacity}")

        if eviction_log_interval is None:
            eviction_log_interval = DEFAULT_EVICTION_LOG_INTERVAL
        if isinstance(eviction_log_interval, bool) or not isinstance(
            eviction_log_interval, int
        ):
            raise ValueError(
                "eviction_log_interval must be an int, "
                f"got {type(eviction_log_interval).__name__}"
            )
        if eviction_log_interval <= 0:
            raise ValueError(
                f"eviction_log_interval must be positive, got {eviction_log_interval}"
            )

        self._capacity = capacity
        self.slots: list[Any] = [_EMPTY] * capacity
        self.read_pos = 0
        self.write_pos = 0
        self.used = 0
        self.evictions = 0
        self._log_eviction = make_sampled_logger(
            "Ring buffer full, evicted oldest value (eviction #%d, capacity %d)",
            log_interval=eviction_log_interval,
            target_logger=logger,
            level=logging.DEBUG,
        )
        logger.debug("Created ring buffer with capacity %d", capacity)

    @classmethod
    def from_config(cls, config: RingBufferConfig) -> RingBuffer[Any]:
        """Build a ring buffer from a validated configuration."""
        return cls(
            config.capacity, eviction_log_interval=config.eviction_log_interval
        )

    @property
    def capacity(self) -> int:
        """Return the number of slots in the buffer."""
        return self._capacity

    def available(self) -> int:
        """Return number of values available to read."""
        return self.used

    def is_empty(self) -> bool:
        """Return True when no slot is occupied."""
        return self.used == 0

    def is_full(self) -> bool:
        """Return True when every slot is occupied."""
        return self.used == self._capacity

    def _advance(self, pos: int) -> int:
        return (pos + 1) % self._capacity

    def read(self) -> T:
        """Read and consume the oldest value.

        :raises BufferEmptyError: if no value is buffered
        """
        if self.is_empty():
            raise BufferEmptyError("ring buffer is empty")

        value = self.slots[self.read_pos]
        self.slots[self.read_pos] = _EMPTY
        self.read_pos = self._advance(self.read_pos)
        self.used -= 1
        return value

    def peek(self) -> T:
        """Return the oldest value without consuming it.

        :raises BufferEmptyError: if no value is buffered
        """
        if self.is_empty():
            raise BufferEmptyError("ring buffer is empty")
        return self.slots[self.read_pos]

    def write(self, value: T) -> None:
        """Write a value into the next free slot.

        :param value: the value to store
        :raises BufferOverflowError: if every slot is occupied
        """
        if self.is_full():
            raise BufferOverflowError(
                f"ring buffer is full (capacity {self._capacity})"
            )

        self.slots[self.write_pos] = value
        self.write_pos = self._advance(self.write_pos)
        self.used += 1

    def force_write(self, value: T) -> None:
        """Write a value, evicting the oldest one if the buffer is full.

        :param value: the value to store
        """
        if not self.is_full():
            self.write(value)
            return

        # Full buffer: read_pos == write_pos, so both move past the new value.
        self.slots[self.read_pos] = value
        self.read_pos = self._advance(self.read_pos)
        self.write_pos = self.read_pos
        self.evictions += 1
        self._log_eviction(self.evictions, self._capacity)

    def clear(self) -> None:
        """Discard all buffered values and reset both cursors."""
        self.slots = [_EMPTY] * self._capacity
        self.read_pos = 0
        self.write_pos = 0
        self.used = 0
        self.evictions = 0
        logger.debug("Cleared ring buffer with capacity %d", self._capacity)

    def __len__(self) -> int:
        return self.used

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, used={self.used})"
