"""
Bounded handoff channel between the house producer and download workers.
"""
from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

from src.housephotos.exceptions import ChannelClosed

T = TypeVar("T")


class HandoffChannel(Generic[T]):
    """
    Thread-safe bounded queue with close semantics for one producer and
    many consumers.

    send() blocks while the channel is full. close() wakes every blocked
    sender and receiver: senders get ChannelClosed, receivers drain what is
    left and then stop.
    """

    def __init__(self, capacity: int = 1):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: Deque[T] = deque()
        self._closed = False
        self._cond = threading.Condition()

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, item: T) -> None:
        """
        Block until there is room, then enqueue item.

        Raises:
            ChannelClosed: If the channel is closed before or while waiting
        """
        with self._cond:
            while len(self._items) >= self.capacity and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._cond.notify_all()

    def close(self, discard_pending: bool = False) -> None:
        """
        Close the channel. Closing twice is a no-op.

        Args:
            discard_pending: Drop queued items so consumers stop after
                their in-flight item
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            if discard_pending:
                self._items.clear()
            self._cond.notify_all()

    def receive(self) -> tuple[T | None, bool]:
        """
        Block until an item is available or the channel is closed.

        Returns:
            (item, True) for an item, (None, False) once closed and drained
        """
        with self._cond:
            while not self._items and not self._closed:
                self._cond.wait()
            if not self._items:
                return None, False
            item = self._items.popleft()
            self._cond.notify_all()
            return item, True

    def __iter__(self) -> Iterator[T]:
        while True:
            item, ok = self.receive()
            if not ok:
                return
            yield item
