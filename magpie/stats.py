"""Running weighted statistics: mean, variance and standard error."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

STATS_Z95 = 1.96
STATS_Z98 = 2.326
STATS_Z99 = 2.576


@dataclass
class Stat:
    """Accumulates weighted values with a numerically stable online update."""

    cardinality: int = 0
    weight: int = 0
    mean: float = 0.0
    sum_of_mean_differences_squared: float = 0.0

    def reset(self) -> None:
        """Forget every value pushed so far."""
        self.cardinality = 0
        self.weight = 0
        self.mean = 0.0
        self.sum_of_mean_differences_squared = 0.0

    def copy(self) -> Stat:
        """Return an independent copy of this stat."""
        return Stat(
            self.cardinality,
            self.weight,
            self.mean,
            self.sum_of_mean_differences_squared,
        )

    def _push_with_cardinality(
        self, value: float, value_weight: int, cardinality: int
    ) -> None:
        self.cardinality += cardinality
        self.weight += value_weight
        old_mean = self.mean
        value_minus_old_mean = float(value) - old_mean
        self.mean = old_mean + (value_weight / self.weight) * value_minus_old_mean
        self.sum_of_mean_differences_squared += (
            value_weight * value_minus_old_mean * (float(value) - self.mean)
        )

    def push(self, value: float, weight: int = 1) -> None:
        """Add one value with the given weight."""
        self._push_with_cardinality(value, weight, 1)

    def push_stat(self, other: Stat) -> None:
        """Add the mean of another stat, carrying its weight and cardinality."""
        self._push_with_cardinality(other.mean, other.weight, other.cardinality)

    def variance(self) -> float:
        """Population variance of the pushed values; 0 for weight up to 1."""
        if self.weight <= 1:
            return 0.0
        return self.sum_of_mean_differences_squared / float(self.weight)

    def stdev(self) -> float:
        """Population standard deviation."""
        return math.sqrt(self.variance())

    def standard_error(self, m: float) -> float:
        """Standard error of the mean scaled by the z-value ``m``."""
        if self.cardinality == 0:
            return math.nan
        return m * math.sqrt(self.variance() / float(self.cardinality))


def combine_stats(stats: Iterable[Stat]) -> Stat:
    """Merge several stats into one as if all their values had been pushed."""
    stats = list(stats)
    combined_cardinality = sum(s.cardinality for s in stats)
    combined_weight = sum(s.weight for s in stats)
    if combined_weight <= 0:
        return Stat()
    combined_mean = sum(s.mean * s.weight for s in stats) / combined_weight
    error_sum_of_squares = sum((s.stdev() ** 2) * s.weight for s in stats)
    sum_of_squares = sum(((s.mean - combined_mean) ** 2) * s.weight for s in stats)
    return Stat(
        combined_cardinality,
        combined_weight,
        combined_mean,
        sum_of_squares + error_sum_of_squares,
    )


def round_to_nearest_int(a: float) -> int:
    """Round half away from zero."""
    return int(a + 0.5 - (1 if a < 0 else 0))