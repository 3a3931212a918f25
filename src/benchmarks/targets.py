"""
Exact Target Generation

Turns PreciseBenchmarks into rounded, actionable targets for the
content generator.
"""

from typing import List

from .models import (
    EntityIntegrationTarget,
    EntityUsagePattern,
    ExactTargets,
    LSIKeywordFrequency,
    LSIKeywordTarget,
    PreciseBenchmarks,
)
from .statistics import round_half_up, round_precise

# Placement strategies for LSI keywords
PLACEMENT_PRIMARY = "primary_sections_and_headings"
PLACEMENT_SUPPORTING = "supporting_paragraphs"
PLACEMENT_CONTEXTUAL = "contextual_mentions"

# Suggested entities carried per entity type
MAX_SUGGESTED_ENTITIES = 5


def determine_placement_strategy(usage_pattern: str, contextual_relevance: float) -> str:
    """
    Pick where an LSI keyword should be placed.

    Args:
        usage_pattern: high, medium or low
        contextual_relevance: Relevance score (0-100)

    Returns:
        Placement strategy name
    """
    if usage_pattern == "high" and contextual_relevance > 50:
        return PLACEMENT_PRIMARY
    if usage_pattern == "medium" or contextual_relevance > 25:
        return PLACEMENT_SUPPORTING
    return PLACEMENT_CONTEXTUAL


def build_lsi_targets(frequencies: List[LSIKeywordFrequency]) -> List[LSIKeywordTarget]:
    return [
        LSIKeywordTarget(
            keyword=lsi.keyword,
            target_frequency=int(round_half_up(lsi.average_frequency)),
            target_density=lsi.average_density,
            placement_strategy=determine_placement_strategy(
                lsi.usage_pattern, lsi.contextual_relevance
            ),
        )
        for lsi in frequencies
    ]


def build_entity_targets(patterns: List[EntityUsagePattern]) -> List[EntityIntegrationTarget]:
    return [
        EntityIntegrationTarget(
            entity_type=pattern.entity_type,
            target_count=int(round_half_up(pattern.average_count)),
            target_density=pattern.average_density,
            suggested_entities=list(pattern.common_entities[:MAX_SUGGESTED_ENTITIES]),
        )
        for pattern in patterns
    ]


def generate_exact_targets(benchmarks: PreciseBenchmarks) -> ExactTargets:
    """
    Derive ExactTargets from benchmarks.

    Keyword density is re-rounded to 3 decimals; it is already at that
    precision, so this is idempotent. Word count and heading targets copy
    the rounded benchmark values.
    """
    return ExactTargets(
        target_keyword_density=round_precise(benchmarks.average_keyword_density),
        target_optimized_headings=benchmarks.average_optimized_headings,
        target_word_count=benchmarks.average_word_count,
        lsi_keyword_targets=build_lsi_targets(benchmarks.lsi_keyword_frequencies),
        entity_integration_targets=build_entity_targets(benchmarks.entity_usage_patterns),
        target_readability_score=benchmarks.average_readability_score,
        target_content_quality=benchmarks.average_content_quality,
    )
