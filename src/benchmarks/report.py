"""
Averaging Report

Side-by-side view of the raw competitor values, the recomputed averages and
the targets, with a precision check between average and target. Used for
debugging target generation and exposed by the benchmarks API.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .models import CompetitorRecord, ExactTargets
from .statistics import calculate_mean, round_half_up, round_precise

logger = logging.getLogger(__name__)

# Max allowed gap between a recomputed average and its target
PRECISION_TOLERANCE = 0.1


@dataclass
class MetricDetail:
    """Raw values, average and target for one metric."""
    metric: str
    values: List[float]
    average: float
    target: float

    @property
    def difference(self) -> float:
        return abs(self.average - self.target)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metric": self.metric,
            "values": list(self.values),
            "average": self.average,
            "target": self.target,
        }


@dataclass
class AveragingReport:
    """Precision report for one aggregation."""
    summary: str
    details: List[MetricDetail] = field(default_factory=list)
    is_valid: bool = True
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "details": [d.to_dict() for d in self.details],
            "validation": {"isValid": self.is_valid, "issues": list(self.issues)},
        }


def build_averaging_report(
    competitors: Sequence[CompetitorRecord],
    targets: ExactTargets,
) -> AveragingReport:
    """
    Recompute the core averages from raw records and compare to targets.

    Args:
        competitors: The validated competitor records
        targets: Targets generated from those records

    Returns:
        AveragingReport flagging any metric off by more than PRECISION_TOLERANCE
    """
    word_counts = [c.word_count for c in competitors]
    densities = [c.keyword_density for c in competitors]
    headings = [c.optimized_heading_count for c in competitors]

    details = [
        MetricDetail(
            metric="Word Count",
            values=word_counts,
            average=round_half_up(calculate_mean(word_counts)),
            target=targets.target_word_count,
        ),
        MetricDetail(
            metric="Keyword Density",
            values=densities,
            average=round_precise(calculate_mean(densities)),
            target=targets.target_keyword_density,
        ),
        MetricDetail(
            metric="Heading Optimization",
            values=headings,
            average=round_half_up(calculate_mean(headings)),
            target=targets.target_optimized_headings,
        ),
    ]

    issues = [
        f"{d.metric} precision issue: {d.difference:.4f} difference"
        for d in details
        if d.difference > PRECISION_TOLERANCE
    ]
    is_valid = not issues

    if issues:
        logger.warning(f"Averaging report found {len(issues)} precision issues: {issues}")

    return AveragingReport(
        summary=(
            f"Analyzed {len(competitors)} competitors with "
            f"{'VALID' if is_valid else 'INVALID'} precision"
        ),
        details=details,
        is_valid=is_valid,
        issues=issues,
    )
