"""Producer-consumer over a bounded buffer guarded by counting semaphores."""

from __future__ import annotations

import queue
from collections import deque
from collections.abc import Iterable
from typing import Any

MAX_CAPACITY = 20


class Semaphore:
    """A counting semaphore that reports instead of blocking when unavailable."""

    def __init__(self, value: int = 1) -> None:
        self.value = value

    def wait(self) -> bool:
        """Take one unit if available; return False (and take nothing) otherwise."""
        if self.value <= 0:
            return False
        self.value -= 1
        return True

    def signal(self) -> None:
        self.value += 1

    def __repr__(self) -> str:
        return f"Semaphore({self.value})"


class BoundedBuffer:
    """A FIFO buffer of fixed capacity with empty, full and mutex semaphores."""

    def __init__(self, capacity: int) -> None:
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 1 and {MAX_CAPACITY}")
        self.capacity = capacity
        self.mutex = Semaphore(1)
        self.empty = Semaphore(capacity)
        self.full = Semaphore(0)
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def produce(self, item: Any) -> None:
        """Put an item in the buffer; raise queue.Full if no slot is free."""
        if not self.empty.wait():
            raise queue.Full("no empty slot in the buffer")
        self.mutex.wait()
        self._items.append(item)
        self.mutex.signal()
        self.full.signal()

    def consume(self) -> Any:
        """Take the oldest item; raise queue.Empty if there is none."""
        if not self.full.wait():
            raise queue.Empty("no item in the buffer")
        self.mutex.wait()
        item = self._items.popleft()
        self.mutex.signal()
        self.empty.signal()
        return item


def simulate(items: Iterable[Any]) -> list[Any]:
    """Produce every item into a buffer sized to hold them all, then consume them."""
    items = list(items)
    buffer = BoundedBuffer(len(items))
    for item in items:
        buffer.produce(item)
    return [buffer.consume() for _ in items]