"""
Benchmark Aggregator

Averages exactly five competitor records into precise benchmarks:
- Word count, keyword density and heading averages with stddev and 95% CI
- LSI keyword frequencies ranked by contextual relevance (top 20)
- Entity usage patterns per entity type (top 15)

The aggregator is stateless: the same five records always produce the
same benchmarks.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .models import (
    CompetitorRecord,
    EntityUsagePattern,
    ExactTargets,
    LSIKeyword,
    LSIKeywordFrequency,
    PreciseBenchmarks,
)
from .report import AveragingReport, build_averaging_report
from .statistics import (
    calculate_confidence_interval,
    calculate_mean,
    calculate_standard_deviation,
    calculate_statistical_metrics,
    round_half_up,
    round_precise,
)
from .targets import generate_exact_targets
from .validation import validate_competitors

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

TOP_LSI_KEYWORDS = 20
TOP_ENTITY_TYPES = 15
MAX_COMMON_ENTITIES = 10

# Average frequency thresholds for LSI usage patterns
USAGE_THRESHOLDS = {
    "high": 5,
    "medium": 2,
}

# Metric keys used in standard_deviations / confidence_intervals
METRIC_WORD_COUNT = "word_count"
METRIC_KEYWORD_DENSITY = "keyword_density"
METRIC_OPTIMIZED_HEADINGS = "optimized_headings"


def classify_usage_pattern(average_frequency: float) -> str:
    """Classify LSI keyword usage as high, medium or low."""
    if average_frequency >= USAGE_THRESHOLDS["high"]:
        return "high"
    elif average_frequency >= USAGE_THRESHOLDS["medium"]:
        return "medium"
    return "low"


def calculate_contextual_relevance(average_frequency: float, average_density: float) -> float:
    """Relevance score (0-100): frequency x density x 10, capped."""
    return round_precise(min(100, average_frequency * average_density * 10))


def coerce_competitors(competitors: Optional[Sequence[Any]]) -> List[Any]:
    """Convert raw scraper dicts to CompetitorRecord, leave records as-is."""
    return [
        CompetitorRecord.from_dict(c) if isinstance(c, dict) else c
        for c in competitors or []
    ]


class BenchmarkAggregator:
    """
    Calculates precise benchmarks and targets from five competitors.

    Usage:
        aggregator = BenchmarkAggregator()
        benchmarks = aggregator.calculate_benchmarks(competitors)
        targets = aggregator.generate_targets(benchmarks)
    """

    def __init__(self, lsi_zero_fill: bool = False):
        """
        Initialize aggregator.

        Args:
            lsi_zero_fill: Average LSI keywords over all five competitors
                           (absent = 0) instead of only the competitors that
                           reported the keyword. Entity types are always
                           zero-filled.
        """
        self.lsi_zero_fill = lsi_zero_fill

    # -------------------------------------------------------------------------
    # Benchmarks
    # -------------------------------------------------------------------------

    def calculate_benchmarks(self, competitors: Sequence[CompetitorRecord]) -> PreciseBenchmarks:
        """
        Calculate precise benchmarks across all five competitors.

        Args:
            competitors: Exactly five competitor records (or raw dicts)

        Returns:
            PreciseBenchmarks

        Raises:
            ValidationError: Wrong competitor count or invalid record
        """
        competitors = coerce_competitors(competitors)
        validate_competitors(competitors)

        word_counts = [c.word_count for c in competitors]
        densities = [c.keyword_density for c in competitors]
        headings = [c.optimized_heading_count for c in competitors]

        metric_values = {
            METRIC_WORD_COUNT: word_counts,
            METRIC_KEYWORD_DENSITY: densities,
            METRIC_OPTIMIZED_HEADINGS: headings,
        }

        mean_word_count = calculate_mean(word_counts)

        benchmarks = PreciseBenchmarks(
            average_word_count=int(round_half_up(mean_word_count)),
            average_keyword_density=round_precise(calculate_mean(densities)),
            average_optimized_headings=int(round_half_up(calculate_mean(headings))),
            lsi_keyword_frequencies=self.aggregate_lsi_keywords(competitors),
            entity_usage_patterns=self.aggregate_entities(competitors, mean_word_count),
            standard_deviations={
                metric: round_precise(calculate_standard_deviation(values))
                for metric, values in metric_values.items()
            },
            confidence_intervals={
                metric: calculate_confidence_interval(values)
                for metric, values in metric_values.items()
            },
            statistical_metrics={
                metric: calculate_statistical_metrics(values)
                for metric, values in metric_values.items()
            },
            average_readability_score=self._optional_average(
                [c.readability_score for c in competitors]
            ),
            average_content_quality=self._optional_average(
                [c.content_quality for c in competitors]
            ),
            competitor_urls=[c.url for c in competitors],
        )

        logger.info(
            f"Calculated benchmarks from {len(competitors)} competitors: "
            f"words={benchmarks.average_word_count}, "
            f"density={benchmarks.average_keyword_density:.3f}%, "
            f"headings={benchmarks.average_optimized_headings}, "
            f"lsi={len(benchmarks.lsi_keyword_frequencies)}, "
            f"entity_types={len(benchmarks.entity_usage_patterns)}"
        )

        return benchmarks

    def aggregate_lsi_keywords(
        self,
        competitors: Sequence[CompetitorRecord],
    ) -> List[LSIKeywordFrequency]:
        """
        Group LSI keywords by exact string and average them.

        Repeated entries within one competitor add up. The sum is divided by
        the number of reporting competitors, or by all competitors when
        lsi_zero_fill is set. Returns the top 20 by contextual relevance.
        """
        grouped: Dict[str, List[LSIKeyword]] = {}
        reporters: Dict[str, set] = {}

        for index, competitor in enumerate(competitors):
            for lsi in competitor.lsi_keywords:
                grouped.setdefault(lsi.keyword, []).append(lsi)
                reporters.setdefault(lsi.keyword, set()).add(index)

        frequencies = []
        for keyword, entries in grouped.items():
            divisor = len(competitors) if self.lsi_zero_fill else len(reporters[keyword])
            average_frequency = sum(e.frequency for e in entries) / divisor
            average_density = sum(e.density for e in entries) / divisor

            frequencies.append(LSIKeywordFrequency(
                keyword=keyword,
                average_frequency=round_precise(average_frequency),
                average_density=round_precise(average_density),
                usage_pattern=classify_usage_pattern(average_frequency),
                contextual_relevance=calculate_contextual_relevance(
                    average_frequency, average_density
                ),
                competitor_count=len(reporters[keyword]),
            ))

        frequencies.sort(key=lambda k: k.contextual_relevance, reverse=True)
        return frequencies[:TOP_LSI_KEYWORDS]

    def aggregate_entities(
        self,
        competitors: Sequence[CompetitorRecord],
        mean_word_count: float,
    ) -> List[EntityUsagePattern]:
        """
        Average entity usage per entity type across all competitors.

        Competitors without a given type count as 0 for it. Returns the top
        15 types by average count.
        """
        entity_types: List[str] = []
        for competitor in competitors:
            for entity in competitor.entities:
                if entity.type not in entity_types:
                    entity_types.append(entity.type)

        patterns = []
        for entity_type in entity_types:
            per_competitor_counts = [
                sum(e.frequency for e in competitor.entities if e.type == entity_type)
                for competitor in competitors
            ]
            average_count = calculate_mean(per_competitor_counts)

            common_entities: List[str] = []
            for competitor in competitors:
                for entity in competitor.entities:
                    if entity.type != entity_type or entity.text in common_entities:
                        continue
                    if len(common_entities) < MAX_COMMON_ENTITIES:
                        common_entities.append(entity.text)

            patterns.append(EntityUsagePattern(
                entity_type=entity_type,
                average_count=round_precise(average_count),
                average_density=round_precise((average_count / mean_word_count) * 100),
                common_entities=common_entities,
                per_competitor_counts=per_competitor_counts,
            ))

        patterns.sort(key=lambda p: p.average_count, reverse=True)
        return patterns[:TOP_ENTITY_TYPES]

    @staticmethod
    def _optional_average(values: List[Optional[float]]) -> Optional[float]:
        """Average to 1 decimal, or None unless every competitor has a value."""
        if not values or any(v is None for v in values):
            return None
        return round_half_up(calculate_mean(values), 1)

    # -------------------------------------------------------------------------
    # Targets and reporting
    # -------------------------------------------------------------------------

    def generate_targets(self, benchmarks: PreciseBenchmarks) -> ExactTargets:
        """Derive exact optimization targets from benchmarks."""
        targets = generate_exact_targets(benchmarks)
        logger.debug(
            f"Generated targets: density={targets.target_keyword_density:.3f}%, "
            f"lsi_targets={len(targets.lsi_keyword_targets)}, "
            f"entity_targets={len(targets.entity_integration_targets)}"
        )
        return targets

    def calculate_all(
        self,
        competitors: Sequence[CompetitorRecord],
    ) -> Tuple[PreciseBenchmarks, ExactTargets]:
        """Benchmarks and targets in one call."""
        benchmarks = self.calculate_benchmarks(competitors)
        return benchmarks, self.generate_targets(benchmarks)

    def build_report(
        self,
        competitors: Sequence[CompetitorRecord],
        targets: ExactTargets,
    ) -> AveragingReport:
        """Precision report comparing raw averages against targets."""
        return build_averaging_report(coerce_competitors(competitors), targets)


# =============================================================================
# MODULE-LEVEL HELPERS
# =============================================================================

def calculate_benchmarks(
    competitors: Sequence[CompetitorRecord],
    lsi_zero_fill: bool = False,
) -> PreciseBenchmarks:
    """Calculate benchmarks with a fresh aggregator."""
    return BenchmarkAggregator(lsi_zero_fill=lsi_zero_fill).calculate_benchmarks(competitors)


def generate_targets(benchmarks: PreciseBenchmarks) -> ExactTargets:
    """Generate targets from benchmarks."""
    return BenchmarkAggregator().generate_targets(benchmarks)
