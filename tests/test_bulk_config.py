"""
Tests for bulk processing configuration and batching.
"""

import pytest

from src.bulk import BulkProcessingConfig, ConfigurationError, create_batches
from src.utils.config import Settings


class TestBulkProcessingConfig:

    def test_defaults(self):
        config = BulkProcessingConfig()

        assert config.max_concurrency == 50
        assert config.batch_size == 10
        assert config.retry_attempts == 3
        assert config.retry_delay_ms == 1000
        assert config.timeout_ms == 300000
        assert config.enable_progress_tracking is True

    def test_from_settings(self):
        settings = Settings(BULK_MAX_CONCURRENCY=20, BULK_BATCH_SIZE=7, BULK_RETRY_ATTEMPTS=1)
        config = BulkProcessingConfig.from_settings(settings)

        assert config.max_concurrency == 20
        assert config.batch_size == 7
        assert config.retry_attempts == 1

    def test_camel_case_overrides(self):
        config = BulkProcessingConfig().with_overrides({
            "maxConcurrency": 3,
            "batchSize": 2,
            "retryDelay": 10,
            "timeoutMs": 500,
        })

        assert config.max_concurrency == 3
        assert config.batch_size == 2
        assert config.retry_delay_ms == 10
        assert config.timeout_ms == 500
        assert config.retry_attempts == 3

    def test_snake_case_overrides(self):
        config = BulkProcessingConfig().with_overrides({"retry_attempts": 0})
        assert config.retry_attempts == 0

    def test_none_values_keep_defaults(self):
        config = BulkProcessingConfig().with_overrides({"batchSize": None})
        assert config.batch_size == 10

    def test_empty_overrides_return_same_config(self):
        config = BulkProcessingConfig()
        assert config.with_overrides({}) is config
        assert config.with_overrides(None) is config

    def test_unknown_option_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown bulk processing option") as exc_info:
            BulkProcessingConfig().with_overrides({"maxThreads": 4})

        assert exc_info.value.field == "maxThreads"

    @pytest.mark.parametrize("overrides,field", [
        ({"max_concurrency": 0}, "max_concurrency"),
        ({"batch_size": -1}, "batch_size"),
        ({"batch_size": 2.5}, "batch_size"),
        ({"retry_attempts": -1}, "retry_attempts"),
        ({"retry_delay_ms": -5}, "retry_delay_ms"),
        ({"timeout_ms": 0}, "timeout_ms"),
        ({"enable_progress_tracking": "yes"}, "enable_progress_tracking"),
    ])
    def test_invalid_values(self, overrides, field):
        with pytest.raises(ConfigurationError) as exc_info:
            BulkProcessingConfig().with_overrides(overrides)

        assert exc_info.value.field == field

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            BulkProcessingConfig(max_concurrency=True)

    def test_to_dict(self):
        assert BulkProcessingConfig().to_dict()["maxConcurrency"] == 50


class TestCreateBatches:

    def test_even_split(self):
        assert create_batches([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]

    def test_last_batch_is_partial(self):
        batches = create_batches(list(range(12)), 5)

        assert [len(b) for b in batches] == [5, 5, 2]
        assert batches[2] == [10, 11]

    def test_empty(self):
        assert create_batches([], 10) == []

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            create_batches([1], 0)
