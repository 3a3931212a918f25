"""
Bulk Processing Module for the Content Benchmark Engine

Runs many independent content generation requests with:
- A global concurrency cap (default 50 in-flight items)
- Sequential batches (default 10 items) for progress grouping
- Per-attempt timeout and exponential-backoff retry (default 3 retries)
- A progress callback after every completed item

Example Usage:
    from src.bulk import BulkProcessor, BulkProcessingRequest

    processor = BulkProcessor(generate_content)
    result = await processor.process_bulk(
        BulkProcessingRequest(items=requests, config={"maxConcurrency": 20}),
        on_progress=print,
    )
    for error in result.errors:
        print(f"Item {error.item_index}: {error.error}")
"""

from .errors import (
    ConfigurationError,
    TransientItemError,
    ItemTimeoutError,
)

from .config import BulkProcessingConfig

from .models import (
    BulkProcessingRequest,
    ProgressUpdate,
    BulkItemResult,
    BulkItemError,
    BulkPerformanceMetrics,
    BulkProcessingResult,
)

from .batching import create_batches

from .retry import (
    GenerateFn,
    backoff_delay_ms,
    describe_error,
    run_with_retry,
)

from .concurrency import ConcurrencyLimiter

from .progress import (
    ProgressCallback,
    ProgressTracker,
)

from .runner import (
    BulkProcessor,
    get_peak_memory_mb,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "TransientItemError",
    "ItemTimeoutError",

    # Config
    "BulkProcessingConfig",

    # Models
    "BulkProcessingRequest",
    "ProgressUpdate",
    "BulkItemResult",
    "BulkItemError",
    "BulkPerformanceMetrics",
    "BulkProcessingResult",

    # Primitives
    "create_batches",
    "GenerateFn",
    "backoff_delay_ms",
    "describe_error",
    "run_with_retry",
    "ConcurrencyLimiter",
    "ProgressCallback",
    "ProgressTracker",

    # Runner
    "BulkProcessor",
    "get_peak_memory_mb",
]
