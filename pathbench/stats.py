"""Statistics helpers for benchmark aggregation.

Implements a sorted numeric series with positional insert and constant-time
median lookup, plus the mean/median helpers used by size-level aggregates.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List, Optional, Sequence, Union

Number = Union[int, float]


def average_of_two(a: Number, b: Number) -> float:
    """Average two numbers of any numeric type as a float."""
    return (float(a) + float(b)) / 2.0


def center_value(values: Sequence[Number]) -> Optional[float]:
    """Return the median of an already sorted sequence.

    Args:
        values: Values sorted in ascending order.

    Returns:
        The middle element for odd lengths, the average of the two middle
        elements for even lengths, or None for an empty sequence.
    """
    n = len(values)
    if n == 0:
        return None
    mid = n // 2
    if n % 2 == 1:
        return float(values[mid])
    return average_of_two(values[mid - 1], values[mid])


def mean(values: Iterable[Number]) -> Optional[float]:
    """Arithmetic mean, or None when there are no values."""
    total = 0.0
    count = 0
    for value in values:
        total += value
        count += 1
    if count == 0:
        return None
    return total / count


class SortedSeries:
    """Growing numeric series kept in ascending order.

    Inserts use binary search for the position; equal values end up adjacent.
    """

    def __init__(self, values: Iterable[Number] | None = None) -> None:
        self._values: List[Number] = sorted(values or [])

    def add(self, value: Number) -> None:
        insort(self._values, value)

    def remove(self, value: Number) -> None:
        """Remove one occurrence of `value`.

        Raises:
            ValueError: If the value is not in the series.
        """
        index = bisect_left(self._values, value)
        if index == len(self._values) or self._values[index] != value:
            raise ValueError(f"{value!r} not in series")
        del self._values[index]

    def clear(self) -> None:
        self._values.clear()

    @property
    def median(self) -> Optional[float]:
        return center_value(self._values)

    @property
    def values(self) -> List[Number]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Number]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"SortedSeries({self._values!r})"
