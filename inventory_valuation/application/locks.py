"""
Per-item transaction locks.

Valuation is read-compute-write over shared state, so transactions against
the same item (and warehouse) must run one at a time. Different items
never wait on each other.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager

ItemKey = tuple[str, str | None]


class ItemLockRegistry:
    """
    Hands out one asyncio.Lock per (item_id, warehouse_id).

    Locks taken through `hold` are counted while held or awaited and are
    dropped from the registry once the last holder leaves.
    """

    def __init__(self) -> None:
        self._locks: dict[ItemKey, asyncio.Lock] = {}
        self._holders: dict[ItemKey, int] = {}

    def lock_for(self, item_id: str, warehouse_id: str | None = None) -> asyncio.Lock:
        key = (item_id, warehouse_id)
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock

    @asynccontextmanager
    async def hold(self, *keys: ItemKey) -> AsyncIterator[None]:
        """
        Hold the locks of several items at once.

        Locks are taken in sorted key order so two transfers over the same
        pair of warehouses cannot deadlock.
        """
        ordered = sorted(set(keys), key=lambda k: (k[0], k[1] or ""))
        for key in ordered:
            self._holders[key] = self._holders.get(key, 0) + 1

        try:
            async with AsyncExitStack() as stack:
                for item_id, warehouse_id in ordered:
                    await stack.enter_async_context(self.lock_for(item_id, warehouse_id))
                yield
        finally:
            for key in ordered:
                self._release(key)

    def _release(self, key: ItemKey) -> None:
        remaining = self._holders[key] - 1
        if remaining:
            self._holders[key] = remaining
            return
        del self._holders[key]
        self._locks.pop(key, None)

    def __len__(self) -> int:
        return len(self._locks)
