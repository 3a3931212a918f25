"""
Benchmark Data Models

Input records scraped from the five top-ranking competitors, and the
benchmark/target structures derived from them.

to_dict() emits camelCase keys, the shape the content generator consumes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# =============================================================================
# INPUT RECORDS
# =============================================================================

@dataclass
class LSIKeyword:
    """LSI keyword usage on one competitor page."""
    keyword: str
    frequency: float
    density: float
    context: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LSIKeyword":
        return cls(
            keyword=data.get("keyword"),
            frequency=data.get("frequency"),
            density=data.get("density"),
            context=list(data.get("context") or []),
        )


@dataclass
class Entity:
    """Named entity found on one competitor page."""
    text: str
    type: str
    frequency: float
    confidence: Optional[float] = None
    context: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        return cls(
            text=data.get("text"),
            type=data.get("type"),
            frequency=data.get("frequency"),
            confidence=data.get("confidence"),
            context=list(data.get("context") or []),
        )


def _pick(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data (camelCase or snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return default


def _entries(raw: Any, entry_cls):
    """Convert dict entries to dataclasses, leaving anything else for validation."""
    if not isinstance(raw, list):
        return raw
    return [entry_cls.from_dict(item) if isinstance(item, dict) else item for item in raw]


@dataclass
class CompetitorRecord:
    """
    SEO metrics for one scraped competitor page.

    Exactly five of these feed one aggregation. Constructed by the scraping
    layer and never mutated afterwards.
    """
    url: str
    word_count: int
    keyword_density: float          # Percentage, e.g. 2.5 = 2.5%
    optimized_heading_count: int
    lsi_keywords: List[LSIKeyword] = field(default_factory=list)
    entities: List[Entity] = field(default_factory=list)
    content: str = ""

    # Optional quality signals
    readability_score: Optional[float] = None
    content_quality: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompetitorRecord":
        """Create from a scraper payload (camelCase or snake_case keys)."""
        return cls(
            url=_pick(data, "url"),
            word_count=_pick(data, "wordCount", "word_count"),
            keyword_density=_pick(data, "keywordDensity", "keyword_density"),
            optimized_heading_count=_pick(
                data,
                "optimizedHeadingCount",
                "optimizedHeadings",
                "optimized_heading_count",
                default=0,
            ),
            lsi_keywords=_entries(
                _pick(data, "lsiKeywords", "lsi_keywords", default=[]), LSIKeyword
            ),
            entities=_entries(_pick(data, "entities", default=[]), Entity),
            content=_pick(data, "content", default=""),
            readability_score=_pick(data, "readabilityScore", "readability_score"),
            content_quality=_pick(data, "contentQuality", "content_quality"),
        )


# =============================================================================
# STATISTICS
# =============================================================================

@dataclass(frozen=True)
class ConfidenceInterval:
    """Lower/upper bounds of a confidence interval."""
    lower: float
    upper: float

    def to_dict(self) -> Dict[str, float]:
        return {"lower": self.lower, "upper": self.upper}


@dataclass(frozen=True)
class StatisticalMetrics:
    """Statistical summary for one metric across all competitors."""
    mean: float
    median: float
    standard_deviation: float
    minimum: float
    maximum: float
    confidence_95: ConfidenceInterval

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": self.mean,
            "median": self.median,
            "standardDeviation": self.standard_deviation,
            "range": {"min": self.minimum, "max": self.maximum},
            "confidence95": self.confidence_95.to_dict(),
        }


# =============================================================================
# BENCHMARKS
# =============================================================================

@dataclass(frozen=True)
class LSIKeywordFrequency:
    """Averaged usage of one LSI keyword."""
    keyword: str
    average_frequency: float
    average_density: float
    usage_pattern: str              # high, medium, low
    contextual_relevance: float     # 0-100
    competitor_count: int           # How many competitors reported it

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "averageFrequency": self.average_frequency,
            "averageDensity": self.average_density,
            "usagePattern": self.usage_pattern,
            "contextualRelevance": self.contextual_relevance,
            "competitorCount": self.competitor_count,
        }


@dataclass(frozen=True)
class EntityUsagePattern:
    """Averaged usage of one entity type."""
    entity_type: str
    average_count: float
    average_density: float
    common_entities: List[str]
    per_competitor_counts: List[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entityType": self.entity_type,
            "averageCount": self.average_count,
            "averageDensity": self.average_density,
            "commonEntities": list(self.common_entities),
            "perCompetitorCounts": list(self.per_competitor_counts),
        }


@dataclass(frozen=True)
class PreciseBenchmarks:
    """Statistical benchmarks averaged across five competitors."""
    average_word_count: int
    average_keyword_density: float  # 3 decimals
    average_optimized_headings: int
    lsi_keyword_frequencies: List[LSIKeywordFrequency]
    entity_usage_patterns: List[EntityUsagePattern]
    standard_deviations: Dict[str, float]
    confidence_intervals: Dict[str, ConfidenceInterval]
    statistical_metrics: Dict[str, StatisticalMetrics] = field(default_factory=dict)
    average_readability_score: Optional[float] = None
    average_content_quality: Optional[float] = None
    competitor_urls: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageWordCount": self.average_word_count,
            "averageKeywordDensity": self.average_keyword_density,
            "averageOptimizedHeadings": self.average_optimized_headings,
            "lsiKeywordFrequencies": [k.to_dict() for k in self.lsi_keyword_frequencies],
            "entityUsagePatterns": [p.to_dict() for p in self.entity_usage_patterns],
            "standardDeviations": dict(self.standard_deviations),
            "confidenceIntervals": {
                metric: ci.to_dict() for metric, ci in self.confidence_intervals.items()
            },
            "statisticalMetrics": {
                metric: stats.to_dict() for metric, stats in self.statistical_metrics.items()
            },
            "averageReadabilityScore": self.average_readability_score,
            "averageContentQuality": self.average_content_quality,
            "competitorUrls": list(self.competitor_urls),
        }


# =============================================================================
# TARGETS
# =============================================================================

@dataclass(frozen=True)
class LSIKeywordTarget:
    """How often and where to use one LSI keyword."""
    keyword: str
    target_frequency: int
    target_density: float
    placement_strategy: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "targetFrequency": self.target_frequency,
            "targetDensity": self.target_density,
            "placementStrategy": self.placement_strategy,
        }


@dataclass(frozen=True)
class EntityIntegrationTarget:
    """How many entities of one type to work into the content."""
    entity_type: str
    target_count: int
    target_density: float
    suggested_entities: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entityType": self.entity_type,
            "targetCount": self.target_count,
            "targetDensity": self.target_density,
            "suggestedEntities": list(self.suggested_entities),
        }


@dataclass(frozen=True)
class ExactTargets:
    """Actionable targets handed to the content generator."""
    target_keyword_density: float
    target_optimized_headings: int
    target_word_count: int
    lsi_keyword_targets: List[LSIKeywordTarget]
    entity_integration_targets: List[EntityIntegrationTarget]
    target_readability_score: Optional[float] = None
    target_content_quality: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "targetKeywordDensity": self.target_keyword_density,
            "targetOptimizedHeadings": self.target_optimized_headings,
            "targetWordCount": self.target_word_count,
            "lsiKeywordTargets": [t.to_dict() for t in self.lsi_keyword_targets],
            "entityIntegrationTargets": [t.to_dict() for t in self.entity_integration_targets],
            "targetReadabilityScore": self.target_readability_score,
            "targetContentQuality": self.target_content_quality,
        }
