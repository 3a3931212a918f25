"""
Statistical Primitives

Mean, median, population standard deviation, range and 95% confidence
intervals used by the benchmark aggregator.

All rounding goes through round_half_up() so that 1.0625 -> 1.063 and
8.5 -> 9, never Python's round-half-to-even.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence, Tuple

from .models import ConfidenceInterval, StatisticalMetrics

# Decimal places kept for densities, deviations and interval bounds
PRECISION_DECIMALS = 3

# z-score for a two-sided 95% confidence interval
Z_SCORE_95 = 1.96


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Works on the exact binary value: 1.0005 is stored as 1.000499...
    and rounds to 1.0.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value as float
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_precise(value: float) -> float:
    """Round to the aggregator precision (3 decimals)."""
    return round_half_up(value, PRECISION_DECIMALS)


def calculate_mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0.0 for empty input."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def calculate_median(values: Sequence[float]) -> float:
    """Median value, 0.0 for empty input."""
    if not values:
        return 0.0

    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


def calculate_standard_deviation(values: Sequence[float]) -> float:
    """
    Population standard deviation: sqrt(mean of squared deviations).

    Not Bessel-corrected.
    """
    if not values:
        return 0.0

    mean = calculate_mean(values)
    squared_differences = [(value - mean) ** 2 for value in values]
    return math.sqrt(calculate_mean(squared_differences))


def calculate_range(values: Sequence[float]) -> Tuple[float, float]:
    """Return (min, max), (0, 0) for empty input."""
    if not values:
        return 0, 0
    return min(values), max(values)


def calculate_confidence_interval(
    values: Sequence[float],
    z_score: float = Z_SCORE_95,
) -> ConfidenceInterval:
    """
    Confidence interval around the mean.

    mean ± z * (stddev / sqrt(n)), bounds rounded to PRECISION_DECIMALS.

    Args:
        values: Sample values
        z_score: z-score for the interval width (default: 95%)

    Returns:
        ConfidenceInterval with lower/upper bounds
    """
    if not values:
        return ConfidenceInterval(lower=0.0, upper=0.0)

    mean = calculate_mean(values)
    std_dev = calculate_standard_deviation(values)
    margin_of_error = z_score * (std_dev / math.sqrt(len(values)))

    return ConfidenceInterval(
        lower=round_precise(mean - margin_of_error),
        upper=round_precise(mean + margin_of_error),
    )


def calculate_statistical_metrics(values: Sequence[float]) -> StatisticalMetrics:
    """Full statistical summary for one metric."""
    minimum, maximum = calculate_range(values)

    return StatisticalMetrics(
        mean=round_precise(calculate_mean(values)),
        median=round_precise(calculate_median(values)),
        standard_deviation=round_precise(calculate_standard_deviation(values)),
        minimum=minimum,
        maximum=maximum,
        confidence_95=calculate_confidence_interval(values),
    )
