"""
Bulk Processing Data Models

Request, progress, error and result structures for the bulk runner.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import BulkProcessingConfig


@dataclass
class BulkProcessingRequest:
    """
    A list of independent generation requests.

    user_id/project_id are passed through to logs and the result untouched.
    """
    items: List[Any]
    config: Optional[Union[BulkProcessingConfig, Mapping[str, Any]]] = None
    user_id: Optional[str] = None
    project_id: Optional[str] = None


@dataclass(frozen=True)
class ProgressUpdate:
    """Snapshot sent to the progress callback after each item completes."""
    total_items: int
    completed_items: int            # Successes + failures
    failed_items: int
    current_batch: int              # 1-based
    total_batches: int
    estimated_time_remaining_ms: float
    throughput_per_second: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "completedItems": self.completed_items,
            "failedItems": self.failed_items,
            "currentBatch": self.current_batch,
            "totalBatches": self.total_batches,
            "estimatedTimeRemainingMs": self.estimated_time_remaining_ms,
            "throughputPerSecond": self.throughput_per_second,
        }


@dataclass(frozen=True)
class BulkItemResult:
    """Successful output, tagged with its original item index."""
    item_index: int
    output: Any
    attempts: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemIndex": self.item_index,
            "output": self.output,
            "attempts": self.attempts,
        }


@dataclass(frozen=True)
class BulkItemError:
    """Permanent failure of one item after retries were exhausted."""
    item_index: int
    request: Any
    error: str
    retry_count: int
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "itemIndex": self.item_index,
            "request": self.request,
            "error": self.error,
            "retryCount": self.retry_count,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class BulkPerformanceMetrics:
    """Performance figures for one bulk run."""
    average_processing_time_ms: float = 0.0
    throughput_per_second: float = 0.0
    memory_usage_mb: float = 0.0            # Peak resident memory (ru_maxrss), not current usage
    cpu_usage_percent: float = 0.0
    concurrency_utilization: float = 0.0    # min(total / max_concurrency, 1) * 100
    peak_concurrency: int = 0
    queue_wait_time_ms: float = 0.0         # Average wait for a concurrency slot

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageProcessingTimeMs": self.average_processing_time_ms,
            "throughputPerSecond": self.throughput_per_second,
            "memoryUsageMB": self.memory_usage_mb,
            "cpuUsagePercent": self.cpu_usage_percent,
            "concurrencyUtilization": self.concurrency_utilization,
            "peakConcurrency": self.peak_concurrency,
            "queueWaitTimeMs": self.queue_wait_time_ms,
        }


@dataclass
class BulkProcessingResult:
    """
    Outcome of one bulk run.

    results holds successes only (len == success_count), ordered by
    item_index. errors are in completion order.
    """
    total_items: int
    success_count: int
    failure_count: int
    processing_time_ms: float
    results: List[BulkItemResult] = field(default_factory=list)
    errors: List[BulkItemError] = field(default_factory=list)
    performance: BulkPerformanceMetrics = field(default_factory=BulkPerformanceMetrics)
    user_id: Optional[str] = None
    project_id: Optional[str] = None

    @property
    def outputs(self) -> List[Any]:
        """Bare generation outputs, in input order."""
        return [r.output for r in self.results]

    @property
    def success_rate(self) -> float:
        """Success percentage (0-100)."""
        if not self.total_items:
            return 0.0
        return (self.success_count / self.total_items) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "successCount": self.success_count,
            "failureCount": self.failure_count,
            "processingTimeMs": self.processing_time_ms,
            "results": [r.to_dict() for r in self.results],
            "errors": [e.to_dict() for e in self.errors],
            "performance": self.performance.to_dict(),
            "userId": self.user_id,
            "projectId": self.project_id,
        }
