"""
Competitor Data Validation

Validates the five competitor records BEFORE any averaging happens.
Fails fast on the first violation with a message naming the competitor
(1-based) and the offending field.
"""

import logging
import math
from typing import Any, Optional, Sequence

from .models import CompetitorRecord, Entity, LSIKeyword

logger = logging.getLogger(__name__)

REQUIRED_COMPETITOR_COUNT = 5


class ValidationError(ValueError):
    """Raised when competitor data cannot be averaged."""

    def __init__(
        self,
        message: str,
        competitor_index: Optional[int] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.competitor_index = competitor_index
        self.field = field


def _is_number(value: Any) -> bool:
    """True for finite ints/floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _is_whole_number(value: Any) -> bool:
    return _is_number(value) and float(value).is_integer()


def _is_non_negative(value: Any) -> bool:
    return _is_number(value) and value >= 0


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _valid_lsi_keyword(entry: Any) -> bool:
    return (
        isinstance(entry, LSIKeyword)
        and _is_non_empty_str(entry.keyword)
        and _is_non_negative(entry.frequency)
        and _is_non_negative(entry.density)
    )


def _valid_entity(entry: Any) -> bool:
    return (
        isinstance(entry, Entity)
        and _is_non_empty_str(entry.text)
        and _is_non_empty_str(entry.type)
        and _is_non_negative(entry.frequency)
    )


def validate_competitor(competitor: CompetitorRecord, position: int) -> None:
    """
    Validate a single competitor record.

    Args:
        competitor: Record to check
        position: 1-based ordinal used in error messages

    Raises:
        ValidationError: On the first invalid field
    """
    if not isinstance(competitor, CompetitorRecord):
        raise ValidationError(
            f"Competitor {position} is not a competitor record",
            competitor_index=position,
        )

    if not _is_non_empty_str(competitor.url):
        raise ValidationError(
            f"Competitor {position} missing URL",
            competitor_index=position,
            field="url",
        )

    if not _is_whole_number(competitor.word_count) or competitor.word_count <= 0:
        raise ValidationError(
            f"Competitor {position} has invalid word count: {competitor.word_count}",
            competitor_index=position,
            field="word_count",
        )

    if not _is_non_negative(competitor.keyword_density):
        raise ValidationError(
            f"Competitor {position} has invalid keyword density: {competitor.keyword_density}",
            competitor_index=position,
            field="keyword_density",
        )

    if not _is_non_negative(competitor.optimized_heading_count):
        raise ValidationError(
            f"Competitor {position} has invalid optimized heading count: "
            f"{competitor.optimized_heading_count}",
            competitor_index=position,
            field="optimized_heading_count",
        )

    if not isinstance(competitor.lsi_keywords, list):
        raise ValidationError(
            f"Competitor {position} LSI keywords must be a list",
            competitor_index=position,
            field="lsi_keywords",
        )

    for j, entry in enumerate(competitor.lsi_keywords, start=1):
        if not _valid_lsi_keyword(entry):
            raise ValidationError(
                f"Competitor {position} LSI keyword {j} has invalid structure",
                competitor_index=position,
                field="lsi_keywords",
            )

    if not isinstance(competitor.entities, list):
        raise ValidationError(
            f"Competitor {position} entities must be a list",
            competitor_index=position,
            field="entities",
        )

    for j, entry in enumerate(competitor.entities, start=1):
        if not _valid_entity(entry):
            raise ValidationError(
                f"Competitor {position} entity {j} has invalid structure",
                competitor_index=position,
                field="entities",
            )

    if not _is_non_empty_str(competitor.content):
        raise ValidationError(
            f"Competitor {position} missing content",
            competitor_index=position,
            field="content",
        )


def validate_competitors(
    competitors: Optional[Sequence[CompetitorRecord]],
    required_count: int = REQUIRED_COMPETITOR_COUNT,
) -> None:
    """
    Validate the full competitor sample.

    Raises:
        ValidationError: Wrong count, or the first invalid record
    """
    received = len(competitors) if competitors else 0
    if received != required_count:
        logger.warning(f"Rejected competitor sample: expected {required_count}, got {received}")
        raise ValidationError(
            f"Expected {required_count} competitors, got {received}",
            field="competitors",
        )

    for position, competitor in enumerate(competitors, start=1):
        validate_competitor(competitor, position)
