"""Bulk processing exceptions."""

from typing import Optional


class ConfigurationError(ValueError):
    """Malformed bulk processing configuration. Raised before any item runs."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TransientItemError(Exception):
    """A single item's generation failed after all attempts."""

    def __init__(self, message: str, attempts: int = 1, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.attempts = attempts
        self.cause = cause


class ItemTimeoutError(Exception):
    """A generation call exceeded timeout_ms."""

    def __init__(self, timeout_ms: float):
        super().__init__(f"Operation timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms
