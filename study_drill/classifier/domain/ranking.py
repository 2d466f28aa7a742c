"""Generic ranking helper."""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def top_k(items: Iterable[T], metric: Callable[[T], int | float], k: int) -> list[T]:
    """Return the ``k`` items with the highest metric, best first.

    Items with equal metric keep their input order.

    Raises:
        ValueError: if k is negative.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    return sorted(items, key=metric, reverse=True)[:k]
