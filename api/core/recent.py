"""
Holder for the most recently created record of one kind.

Instances live on `app.state` and are handed to routes through FastAPI
dependencies. Updates made through `update()` are serialized per holder with an
asyncio lock. Nothing here tracks writes made by other processes, so the held
record can go stale.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class RecentRecord(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._record = initial
        self._lock = asyncio.Lock()

    def get(self) -> T:
        return self._record

    def set(self, record: T) -> T:
        self._record = record
        return record

    async def update(self, fn: Callable[[T], Awaitable[T]]) -> T:
        """
        Run `fn` on the held record and keep what it returns.

        If `fn` raises, the held record is left as it was.
        """
        async with self._lock:
            updated = await fn(self._record)
            self._record = updated
            return updated
