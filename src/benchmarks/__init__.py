"""
Benchmark Module for the Content Benchmark Engine

Averages the five top-ranking competitors into precise targets:

1. **Precise Benchmarks**
   Mean word count, keyword density (0.001 precision) and optimized headings,
   with population standard deviation and 95% confidence intervals.

2. **LSI & Entity Patterns**
   LSI keywords ranked by contextual relevance (top 20), entity types
   ranked by average count (top 15).

3. **Exact Targets**
   Rounded, actionable values and placement strategies for the generator.

Example Usage:
    from src.benchmarks import BenchmarkAggregator, CompetitorRecord

    competitors = [CompetitorRecord.from_dict(page) for page in scraped_pages]

    aggregator = BenchmarkAggregator()
    benchmarks = aggregator.calculate_benchmarks(competitors)
    targets = aggregator.generate_targets(benchmarks)
    print(f"Target density: {targets.target_keyword_density:.3f}%")
"""

from .models import (
    LSIKeyword,
    Entity,
    CompetitorRecord,
    ConfidenceInterval,
    StatisticalMetrics,
    LSIKeywordFrequency,
    EntityUsagePattern,
    PreciseBenchmarks,
    LSIKeywordTarget,
    EntityIntegrationTarget,
    ExactTargets,
)

from .statistics import (
    PRECISION_DECIMALS,
    round_half_up,
    round_precise,
    calculate_mean,
    calculate_median,
    calculate_standard_deviation,
    calculate_range,
    calculate_confidence_interval,
    calculate_statistical_metrics,
)

from .validation import (
    REQUIRED_COMPETITOR_COUNT,
    ValidationError,
    validate_competitor,
    validate_competitors,
)

from .targets import (
    PLACEMENT_PRIMARY,
    PLACEMENT_SUPPORTING,
    PLACEMENT_CONTEXTUAL,
    determine_placement_strategy,
    generate_exact_targets,
)

from .report import (
    AveragingReport,
    MetricDetail,
    build_averaging_report,
)

from .aggregator import (
    BenchmarkAggregator,
    classify_usage_pattern,
    calculate_contextual_relevance,
    calculate_benchmarks,
    generate_targets,
)

__all__ = [
    # Models
    "LSIKeyword",
    "Entity",
    "CompetitorRecord",
    "ConfidenceInterval",
    "StatisticalMetrics",
    "LSIKeywordFrequency",
    "EntityUsagePattern",
    "PreciseBenchmarks",
    "LSIKeywordTarget",
    "EntityIntegrationTarget",
    "ExactTargets",

    # Statistics
    "PRECISION_DECIMALS",
    "round_half_up",
    "round_precise",
    "calculate_mean",
    "calculate_median",
    "calculate_standard_deviation",
    "calculate_range",
    "calculate_confidence_interval",
    "calculate_statistical_metrics",

    # Validation
    "REQUIRED_COMPETITOR_COUNT",
    "ValidationError",
    "validate_competitor",
    "validate_competitors",

    # Targets
    "PLACEMENT_PRIMARY",
    "PLACEMENT_SUPPORTING",
    "PLACEMENT_CONTEXTUAL",
    "determine_placement_strategy",
    "generate_exact_targets",

    # Report
    "AveragingReport",
    "MetricDetail",
    "build_averaging_report",

    # Aggregator
    "BenchmarkAggregator",
    "classify_usage_pattern",
    "calculate_contextual_relevance",
    "calculate_benchmarks",
    "generate_targets",
]
