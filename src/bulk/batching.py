"""Batch partitioning for bulk runs."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def create_batches(items: Sequence[T], batch_size: int) -> List[List[T]]:
    """
    Split items into sequential batches of batch_size (last may be smaller).

    Args:
        items: Items to partition
        batch_size: Maximum items per batch (must be positive)

    Returns:
        List of batches, empty for no items
    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [list(items[i:i + batch_size]) for i in range(0, len(items), batch_size)]
