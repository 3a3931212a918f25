"""
Concurrency Limiter

Global cap on in-flight items across a whole bulk run, independent of
batch boundaries. Single event loop, so the counters need no lock.
"""

import asyncio
import time


class ConcurrencyLimiter:
    """
    Async context manager around asyncio.Semaphore with usage accounting.

    Usage:
        limiter = ConcurrencyLimiter(max_concurrency=50)
        async with limiter:
            await do_work()
    """

    def __init__(self, max_concurrency: int):
        if max_concurrency <= 0:
            raise ValueError(f"max_concurrency must be positive, got {max_concurrency}")

        self.max_concurrency = max_concurrency
        self._semaphore = asyncio.Semaphore(max_concurrency)

        self.active = 0             # Currently holding a slot
        self.waiting = 0            # Blocked waiting for a slot
        self.peak = 0               # Highest simultaneous active count
        self.acquisitions = 0
        self.total_wait_seconds = 0.0

    async def __aenter__(self) -> "ConcurrencyLimiter":
        self.waiting += 1
        started = time.perf_counter()
        try:
            await self._semaphore.acquire()
        finally:
            self.waiting -= 1

        self.total_wait_seconds += time.perf_counter() - started
        self.acquisitions += 1
        self.active += 1
        self.peak = max(self.peak, self.active)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.active -= 1
        self._semaphore.release()

    @property
    def average_wait_ms(self) -> float:
        """Average time spent waiting for a slot."""
        if not self.acquisitions:
            return 0.0
        return (self.total_wait_seconds / self.acquisitions) * 1000
