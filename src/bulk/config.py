"""
Bulk Processing Configuration

Explicit, validated configuration for the bulk runner. Per-request
overrides are merged onto the defaults and re-validated before any
item is processed.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from src.utils.config import Settings

from .errors import ConfigurationError

# camelCase option names from API payloads -> field names
CAMEL_CASE_ALIASES = {
    "maxConcurrency": "max_concurrency",
    "batchSize": "batch_size",
    "retryAttempts": "retry_attempts",
    "retryDelay": "retry_delay_ms",
    "retryDelayMs": "retry_delay_ms",
    "timeoutMs": "timeout_ms",
    "enableProgressTracking": "enable_progress_tracking",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class BulkProcessingConfig:
    """Configuration for one bulk run."""
    max_concurrency: int = 50           # Global cap on in-flight generation calls
    batch_size: int = 10                # Items per batch
    retry_attempts: int = 3             # Retries after the first attempt
    retry_delay_ms: float = 1000        # Base backoff, doubled per retry
    timeout_ms: float = 300000          # Per-attempt timeout (5 minutes)
    enable_progress_tracking: bool = True

    def __post_init__(self):
        if not _is_int(self.max_concurrency) or self.max_concurrency <= 0:
            raise ConfigurationError(
                f"max_concurrency must be a positive integer, got {self.max_concurrency!r}",
                field="max_concurrency",
            )
        if not _is_int(self.batch_size) or self.batch_size <= 0:
            raise ConfigurationError(
                f"batch_size must be a positive integer, got {self.batch_size!r}",
                field="batch_size",
            )
        if not _is_int(self.retry_attempts) or self.retry_attempts < 0:
            raise ConfigurationError(
                f"retry_attempts must be a non-negative integer, got {self.retry_attempts!r}",
                field="retry_attempts",
            )
        if not _is_number(self.retry_delay_ms) or self.retry_delay_ms < 0:
            raise ConfigurationError(
                f"retry_delay_ms must be a non-negative number, got {self.retry_delay_ms!r}",
                field="retry_delay_ms",
            )
        if not _is_number(self.timeout_ms) or self.timeout_ms <= 0:
            raise ConfigurationError(
                f"timeout_ms must be a positive number, got {self.timeout_ms!r}",
                field="timeout_ms",
            )
        if not isinstance(self.enable_progress_tracking, bool):
            raise ConfigurationError(
                f"enable_progress_tracking must be a bool, got {self.enable_progress_tracking!r}",
                field="enable_progress_tracking",
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> "BulkProcessingConfig":
        """Build defaults from environment settings."""
        return cls(
            max_concurrency=settings.BULK_MAX_CONCURRENCY,
            batch_size=settings.BULK_BATCH_SIZE,
            retry_attempts=settings.BULK_RETRY_ATTEMPTS,
            retry_delay_ms=settings.BULK_RETRY_DELAY_MS,
            timeout_ms=settings.BULK_TIMEOUT_MS,
            enable_progress_tracking=settings.BULK_ENABLE_PROGRESS_TRACKING,
        )

    def with_overrides(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> "BulkProcessingConfig":
        """
        Return a copy with overrides applied.

        Accepts field names or the camelCase option names. None values are
        ignored (treated as "use default").

        Raises:
            ConfigurationError: Unknown option or invalid value
        """
        if not overrides:
            return self

        valid_fields = {f.name for f in fields(self)}
        changes: Dict[str, Any] = {}

        for key, value in overrides.items():
            name = CAMEL_CASE_ALIASES.get(key, key)
            if name not in valid_fields:
                raise ConfigurationError(f"Unknown bulk processing option: {key}", field=key)
            if value is not None:
                changes[name] = value

        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "maxConcurrency": self.max_concurrency,
            "batchSize": self.batch_size,
            "retryAttempts": self.retry_attempts,
            "retryDelayMs": self.retry_delay_ms,
            "timeoutMs": self.timeout_ms,
            "enableProgressTracking": self.enable_progress_tracking,
        }
