"""Run the full statistics pipeline over a sample of numbers."""
from __future__ import annotations

import logging
import math
import sys
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Iterable, Iterator

from basicstats.services import aggregates
from basicstats.services.buffer import INITIAL_CAPACITY, GrowableBuffer
from basicstats.services.errors import EmptyInput, InputUnavailable
from basicstats.services.reader import iter_values

__all__: list[str] = [
    "StatsReport",
    "sample_set",
    "compute_stats",
    "analyze_file",
]

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


@dataclass(frozen=True)
class StatsReport:
    count: int
    mean: float
    median: float
    mode: float
    stddev: float
    harmonic_mean: float
    unused_capacity: int

    def as_dict(self) -> dict[str, float | int]:
        return asdict(self)

    def non_finite_fields(self) -> list[str]:
        """Names of the float fields that overflowed to inf or nan."""
        return [name for name, value in self.as_dict().items() if not math.isfinite(value)]


@contextmanager
def sample_set(initial_capacity: int = INITIAL_CAPACITY, max_capacity: int | None = None) -> Iterator[GrowableBuffer]:
    """Yield an empty buffer whose storage is released on every exit path."""
    buffer = GrowableBuffer(initial_capacity, max_capacity)
    try:
        yield buffer
    finally:
        buffer.release()


def compute_stats(
    values: Iterable[float],
    *,
    initial_capacity: int = INITIAL_CAPACITY,
    max_capacity: int | None = None,
) -> StatsReport:
    """
    Ingest values, sort them, and compute every aggregate in turn.
    Raises EmptyInput, DivisionByZero or AllocationFailure; no report is built on error.
    """
    with sample_set(initial_capacity, max_capacity) as samples:
        samples.extend(values)
        logger.debug("Ingested %d values (capacity %d)", samples.count, samples.capacity)
        if not samples.count:
            raise EmptyInput()

        samples.sort()
        avg = aggregates.mean(samples)
        mid = aggregates.median(samples)
        most_common = aggregates.mode(samples)
        spread = aggregates.stddev(samples, avg)
        harmonic = aggregates.harmonic_mean(samples)

        report = StatsReport(
            count=samples.count,
            mean=avg,
            median=mid,
            mode=most_common,
            stddev=spread,
            harmonic_mean=harmonic,
            unused_capacity=samples.unused_capacity,
        )
    logger.info("Computed statistics for %d values", report.count)
    return report


def analyze_file(
    path: str,
    *,
    initial_capacity: int = INITIAL_CAPACITY,
    max_capacity: int | None = None,
) -> StatsReport:
    """
    Read numbers from a file (or stdin when path is "-") and compute their statistics.
    Raises InputUnavailable when the source cannot be opened or read.
    """
    if path == STDIN_PATH:
        # undecodable bytes become U+FFFD, which ends parsing like any other bad token
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        return _analyze_stream(sys.stdin, path, initial_capacity, max_capacity)
    try:
        stream = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputUnavailable(f"cannot open {path!r}: {exc.strerror or exc}") from exc
    with stream:
        return _analyze_stream(stream, path, initial_capacity, max_capacity)


def _analyze_stream(stream, path: str, initial_capacity: int, max_capacity: int | None) -> StatsReport:
    try:
        return compute_stats(iter_values(stream), initial_capacity=initial_capacity, max_capacity=max_capacity)
    except OSError as exc:
        raise InputUnavailable(f"cannot read {path!r}: {exc}") from exc
