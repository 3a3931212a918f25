"""
Bulk Processing Runner

Runs many independent content generation requests:
- Sequential batches of batch_size (grouping for progress reporting)
- Global concurrency cap of max_concurrency in-flight items
- Per-attempt timeout and exponential-backoff retry per item
- Progress callback after every completed item

A failing item never aborts the run; it is recorded in the result's
errors. Only a malformed configuration raises, before any work starts.
"""

import asyncio
import logging
import sys
import time
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from src.utils.config import get_settings

from .batching import create_batches
from .concurrency import ConcurrencyLimiter
from .config import BulkProcessingConfig
from .errors import ConfigurationError, TransientItemError
from .models import (
    BulkItemError,
    BulkItemResult,
    BulkPerformanceMetrics,
    BulkProcessingRequest,
    BulkProcessingResult,
)
from .progress import ProgressCallback, ProgressTracker
from .retry import GenerateFn, run_with_retry

logger = logging.getLogger(__name__)


def get_peak_memory_mb() -> float:
    """Peak resident memory of this process in MB (0.0 where unsupported)."""
    try:
        import resource
    except ImportError:  # Windows
        return 0.0

    max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return max_rss / 1024 / 1024  # bytes
    return max_rss / 1024  # kilobytes


class BulkProcessor:
    """
    Bounded-concurrency runner for content generation jobs.

    Usage:
        processor = BulkProcessor(generate_content, BulkProcessingConfig(max_concurrency=20))

        result = await processor.process_bulk(
            BulkProcessingRequest(items=requests, project_id="p-1"),
            on_progress=lambda update: print(update.completed_items),
        )
        print(f"{result.success_count}/{result.total_items} succeeded")
    """

    def __init__(
        self,
        generate: GenerateFn,
        config: Optional[Union[BulkProcessingConfig, Mapping[str, Any]]] = None,
    ):
        """
        Initialize processor.

        Args:
            generate: Async function taking one request and returning its result
            config: Default configuration (or overrides of the settings defaults)

        Raises:
            ConfigurationError: Invalid configuration
        """
        self.generate = generate

        if isinstance(config, BulkProcessingConfig):
            self.config = config
        else:
            self.config = BulkProcessingConfig.from_settings(get_settings()).with_overrides(config)

        # Limiters of the runs in flight, for get_processing_stats()
        self._active_limiters: Set[ConcurrencyLimiter] = set()

    def _resolve_config(self, request: BulkProcessingRequest) -> BulkProcessingConfig:
        """Merge request overrides onto the processor defaults."""
        if request.config is None:
            return self.config
        if isinstance(request.config, BulkProcessingConfig):
            return request.config
        if isinstance(request.config, Mapping):
            return self.config.with_overrides(request.config)
        raise ConfigurationError(
            f"Unsupported config type: {type(request.config).__name__}",
            field="config",
        )

    async def process_bulk(
        self,
        request: BulkProcessingRequest,
        on_progress: Optional[ProgressCallback] = None,
    ) -> BulkProcessingResult:
        """
        Process all items of a bulk request.

        Args:
            request: Items plus optional config overrides
            on_progress: Called synchronously after each completed item

        Returns:
            BulkProcessingResult, also when every item failed

        Raises:
            ConfigurationError: Malformed configuration or items
        """
        config = self._resolve_config(request)
        if not isinstance(request.items, (list, tuple)):
            raise ConfigurationError(
                f"items must be a list, got {type(request.items).__name__}",
                field="items",
            )

        items = list(request.items)
        total_items = len(items)

        if not items:
            logger.info("Bulk processing skipped: no items")
            return BulkProcessingResult(
                total_items=0,
                success_count=0,
                failure_count=0,
                processing_time_ms=0.0,
                user_id=request.user_id,
                project_id=request.project_id,
            )

        logger.info(
            f"Starting bulk processing: items={total_items}, "
            f"max_concurrency={config.max_concurrency}, batch_size={config.batch_size}, "
            f"user_id={request.user_id}, project_id={request.project_id}"
        )

        started = time.perf_counter()
        cpu_started = time.process_time()

        batches = create_batches(items, config.batch_size)
        limiter = ConcurrencyLimiter(config.max_concurrency)
        tracker = ProgressTracker(
            total_items=total_items,
            total_batches=len(batches),
            callback=on_progress,
            enabled=config.enable_progress_tracking,
        )

        successes: Dict[int, BulkItemResult] = {}
        errors: List[BulkItemError] = []

        self._active_limiters.add(limiter)
        try:
            for batch_index, batch in enumerate(batches):
                batch_number = batch_index + 1
                offset = batch_index * config.batch_size

                logger.info(
                    f"Processing batch {batch_number}/{len(batches)} "
                    f"({len(batch)} items, {total_items} total)"
                )

                await asyncio.gather(*(
                    self._process_item(
                        item=item,
                        item_index=offset + position,
                        batch_number=batch_number,
                        config=config,
                        limiter=limiter,
                        tracker=tracker,
                        successes=successes,
                        errors=errors,
                    )
                    for position, item in enumerate(batch)
                ))
        finally:
            self._active_limiters.discard(limiter)

        elapsed_seconds = time.perf_counter() - started
        processing_time_ms = elapsed_seconds * 1000

        performance = self._calculate_performance(
            total_items=total_items,
            processing_time_ms=processing_time_ms,
            cpu_seconds=time.process_time() - cpu_started,
            config=config,
            limiter=limiter,
        )

        result = BulkProcessingResult(
            total_items=total_items,
            success_count=len(successes),
            failure_count=len(errors),
            processing_time_ms=processing_time_ms,
            results=[successes[index] for index in sorted(successes)],
            errors=errors,
            performance=performance,
            user_id=request.user_id,
            project_id=request.project_id,
        )

        logger.info(
            f"Bulk processing completed: {result.success_count}/{total_items} succeeded, "
            f"{result.failure_count} failed in {processing_time_ms:.0f}ms "
            f"({performance.throughput_per_second:.2f} items/s)"
        )

        return result

    async def _process_item(
        self,
        item: Any,
        item_index: int,
        batch_number: int,
        config: BulkProcessingConfig,
        limiter: ConcurrencyLimiter,
        tracker: ProgressTracker,
        successes: Dict[int, BulkItemResult],
        errors: List[BulkItemError],
    ) -> None:
        """Run one item inside a concurrency slot and record the outcome."""
        failure: Optional[TransientItemError] = None

        async with limiter:
            try:
                output, attempts = await run_with_retry(self.generate, item, config, item_index)
            except TransientItemError as e:
                failure = e

        if failure is None:
            successes[item_index] = BulkItemResult(
                item_index=item_index,
                output=output,
                attempts=attempts,
            )
            tracker.record(success=True, current_batch=batch_number)
            return

        errors.append(BulkItemError(
            item_index=item_index,
            request=item,
            error=str(failure),
            retry_count=failure.attempts - 1,
            timestamp=datetime.now(),
        ))
        logger.error(
            f"Bulk processing item {item_index} failed after {failure.attempts} attempts: {failure}"
        )
        tracker.record(success=False, current_batch=batch_number)

    @staticmethod
    def _calculate_performance(
        total_items: int,
        processing_time_ms: float,
        cpu_seconds: float,
        config: BulkProcessingConfig,
        limiter: ConcurrencyLimiter,
    ) -> BulkPerformanceMetrics:
        """Performance metrics for a finished run."""
        elapsed_seconds = processing_time_ms / 1000

        return BulkPerformanceMetrics(
            average_processing_time_ms=processing_time_ms / total_items if total_items else 0.0,
            throughput_per_second=total_items / elapsed_seconds if elapsed_seconds > 0 else 0.0,
            memory_usage_mb=get_peak_memory_mb(),
            cpu_usage_percent=(cpu_seconds / elapsed_seconds) * 100 if elapsed_seconds > 0 else 0.0,
            concurrency_utilization=min(total_items / config.max_concurrency, 1) * 100,
            peak_concurrency=limiter.peak,
            queue_wait_time_ms=limiter.average_wait_ms,
        )

    def get_processing_stats(self) -> Dict[str, Any]:
        """Current activity summed over all runs in flight (zeros when idle)."""
        limiters = list(self._active_limiters)
        return {
            "active_operations": sum(limiter.active for limiter in limiters),
            "queue_length": sum(limiter.waiting for limiter in limiters),
            "memory_usage_mb": get_peak_memory_mb(),
        }
