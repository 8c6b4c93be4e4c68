"""Aggregate statistics over a sample of floats.

Median and mode expect ascending input; the other aggregates are order independent.
"""
from __future__ import annotations

from typing import Sequence

from basicstats.services.errors import DivisionByZero, EmptyInput
from basicstats.services.sqrt import babylonian_sqrt

__all__: list[str] = [
    "mean",
    "median",
    "mode",
    "stddev",
    "harmonic_mean",
]


def _require_values(values: Sequence[float]) -> int:
    n = len(values)
    if n == 0:
        raise EmptyInput()
    return n


def mean(values: Sequence[float]) -> float:
    n = _require_values(values)
    total = 0.0
    for v in values:
        total += v
    return total / n


def stddev(values: Sequence[float], avg: float | None = None) -> float:
    """
    Population standard deviation (divides by n).
    Pass a precomputed mean as avg to skip recomputing it.
    """
    n = _require_values(values)
    if avg is None:
        avg = mean(values)
    sum_sq = 0.0
    for v in values:
        diff = v - avg
        sum_sq += diff * diff
    return babylonian_sqrt(sum_sq / n)


def median(values: Sequence[float]) -> float:
    n = _require_values(values)
    mid = n // 2
    if n % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2.0
    return float(values[mid])


def mode(values: Sequence[float]) -> float:
    """
    Value of the longest run of equal adjacent values in sorted input.
    Only a strictly longer run replaces the current mode, so the first run
    of the winning length wins. The trailing run is compared as well.
    """
    n = _require_values(values)
    best = values[0]
    best_count = 1
    count = 1
    for i in range(1, n):
        if values[i] == values[i - 1]:
            count += 1
            continue
        if count > best_count:
            best_count = count
            best = values[i - 1]
        count = 1
    if count > best_count:
        best = values[n - 1]
    return float(best)


def harmonic_mean(values: Sequence[float]) -> float:
    n = _require_values(values)
    reciprocal_sum = 0.0
    for v in values:
        if v == 0:
            raise DivisionByZero("harmonic mean is undefined when a value is zero")
        reciprocal_sum += 1 / v
    if reciprocal_sum == 0:
        raise DivisionByZero("harmonic mean is undefined when the reciprocals sum to zero")
    return n / reciprocal_sum
