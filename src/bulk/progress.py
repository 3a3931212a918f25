"""
Progress Tracking

Counts completed items and reports throughput and ETA to an optional
callback after every item. A failing callback is logged, never fatal.
"""

import logging
import math
import time
from typing import Callable, Optional

from .models import ProgressUpdate

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressUpdate], None]


class ProgressTracker:
    """Per-run completion counter and progress reporter."""

    def __init__(
        self,
        total_items: int,
        total_batches: int,
        callback: Optional[ProgressCallback] = None,
        enabled: bool = True,
    ):
        self.total_items = total_items
        self.total_batches = total_batches
        self.callback = callback
        self.enabled = enabled

        self.succeeded = 0
        self.failed = 0
        self.started_at = time.perf_counter()

    @property
    def completed(self) -> int:
        return self.succeeded + self.failed

    def snapshot(self, current_batch: int) -> ProgressUpdate:
        """Build a progress update from the current counters."""
        elapsed_seconds = time.perf_counter() - self.started_at
        throughput = self.completed / elapsed_seconds if elapsed_seconds > 0 else 0.0

        remaining = self.total_items - self.completed
        if throughput > 0 and math.isfinite(throughput):
            eta_ms = (remaining / throughput) * 1000
        else:
            eta_ms = 0.0

        return ProgressUpdate(
            total_items=self.total_items,
            completed_items=self.completed,
            failed_items=self.failed,
            current_batch=current_batch,
            total_batches=self.total_batches,
            estimated_time_remaining_ms=eta_ms,
            throughput_per_second=throughput,
        )

    def record(self, success: bool, current_batch: int) -> Optional[ProgressUpdate]:
        """
        Count one finished item and notify the callback.

        Args:
            success: Whether the item succeeded
            current_batch: 1-based batch number of the item

        Returns:
            The update sent, or None when tracking is off
        """
        if success:
            self.succeeded += 1
        else:
            self.failed += 1

        if not self.enabled or self.callback is None:
            return None

        update = self.snapshot(current_batch)
        try:
            self.callback(update)
        except Exception as e:
            logger.warning(f"Progress callback failed (continuing): {e}")
        return update
