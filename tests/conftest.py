"""
Pytest Configuration and Shared Fixtures

Provides common fixtures and configuration for all test modules.
"""

import copy
from typing import Any, Dict, List

import pytest

from src.benchmarks import CompetitorRecord
from src.bulk import BulkProcessingConfig


# ============================================================================
# Competitor Fixtures
# ============================================================================

COMPETITOR_PAGES: List[Dict[str, Any]] = [
    {
        "url": "https://competitor1.com",
        "wordCount": 1500,
        "keywordDensity": 2.5,
        "optimizedHeadings": 8,
        "lsiKeywords": [
            {"keyword": "digital marketing", "frequency": 5, "density": 0.33, "context": ["intro", "conclusion"]},
            {"keyword": "SEO strategy", "frequency": 3, "density": 0.20, "context": ["body"]},
        ],
        "entities": [
            {"text": "Google", "type": "ORGANIZATION", "frequency": 4, "confidence": 0.95},
            {"text": "New York", "type": "LOCATION", "frequency": 2, "confidence": 0.90},
        ],
        "readabilityScore": 75,
        "contentQuality": 85,
        "content": "Sample content for competitor 1...",
    },
    {
        "url": "https://competitor2.com",
        "wordCount": 1800,
        "keywordDensity": 2.8,
        "optimizedHeadings": 10,
        "lsiKeywords": [
            {"keyword": "digital marketing", "frequency": 6, "density": 0.33},
            {"keyword": "content strategy", "frequency": 4, "density": 0.22},
        ],
        "entities": [
            {"text": "Facebook", "type": "ORGANIZATION", "frequency": 3, "confidence": 0.92},
            {"text": "California", "type": "LOCATION", "frequency": 1, "confidence": 0.88},
        ],
        "readabilityScore": 78,
        "contentQuality": 88,
        "content": "Sample content for competitor 2...",
    },
    {
        "url": "https://competitor3.com",
        "wordCount": 1200,
        "keywordDensity": 2.2,
        "optimizedHeadings": 6,
        "lsiKeywords": [
            {"keyword": "digital marketing", "frequency": 4, "density": 0.33},
            {"keyword": "online advertising", "frequency": 2, "density": 0.17},
        ],
        "entities": [
            {"text": "Amazon", "type": "ORGANIZATION", "frequency": 5, "confidence": 0.97},
            {"text": "Seattle", "type": "LOCATION", "frequency": 3, "confidence": 0.93},
        ],
        "readabilityScore": 72,
        "contentQuality": 82,
        "content": "Sample content for competitor 3...",
    },
    {
        "url": "https://competitor4.com",
        "wordCount": 2000,
        "keywordDensity": 3.0,
        "optimizedHeadings": 12,
        "lsiKeywords": [
            {"keyword": "digital marketing", "frequency": 7, "density": 0.35},
            {"keyword": "social media", "frequency": 5, "density": 0.25},
        ],
        "entities": [
            {"text": "Microsoft", "type": "ORGANIZATION", "frequency": 6, "confidence": 0.96},
            {"text": "Washington", "type": "LOCATION", "frequency": 2, "confidence": 0.89},
        ],
        "readabilityScore": 80,
        "contentQuality": 90,
        "content": "Sample content for competitor 4...",
    },
    {
        "url": "https://competitor5.com",
        "wordCount": 1600,
        "keywordDensity": 2.6,
        "optimizedHeadings": 9,
        "lsiKeywords": [
            {"keyword": "digital marketing", "frequency": 5, "density": 0.31},
            {"keyword": "email marketing", "frequency": 3, "density": 0.19},
        ],
        "entities": [
            {"text": "Apple", "type": "ORGANIZATION", "frequency": 4, "confidence": 0.94},
            {"text": "Texas", "type": "LOCATION", "frequency": 1, "confidence": 0.87},
        ],
        "readabilityScore": 76,
        "contentQuality": 86,
        "content": "Sample content for competitor 5...",
    },
]


@pytest.fixture
def competitor_pages() -> List[Dict[str, Any]]:
    """Raw scraper payloads for five competitors (deep copy per test)."""
    return copy.deepcopy(COMPETITOR_PAGES)


@pytest.fixture
def competitors(competitor_pages) -> List[CompetitorRecord]:
    """Five valid competitor records."""
    return [CompetitorRecord.from_dict(page) for page in competitor_pages]


# ============================================================================
# Bulk Processing Fixtures
# ============================================================================

@pytest.fixture
def fast_config() -> BulkProcessingConfig:
    """Bulk config with short delays for tests."""
    return BulkProcessingConfig(
        max_concurrency=5,
        batch_size=3,
        retry_attempts=2,
        retry_delay_ms=1,
        timeout_ms=5000,
        enable_progress_tracking=True,
    )


@pytest.fixture
def generation_requests() -> List[Dict[str, Any]]:
    """Simple content generation requests."""
    return [
        {"keyword": f"keyword {i + 1}", "location": "New York", "wordCount": 1000}
        for i in range(5)
    ]


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
