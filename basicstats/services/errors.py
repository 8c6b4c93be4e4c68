"""Error types raised by the statistics core."""
from __future__ import annotations

__all__: list[str] = [
    "StatsError",
    "UsageError",
    "InputUnavailable",
    "ConfigurationError",
    "AllocationFailure",
    "EmptyInput",
    "DivisionByZero",
]


class StatsError(Exception):
    """Base class for every error that aborts a statistics run."""

    exit_code = 1


class UsageError(StatsError):
    exit_code = 2


class InputUnavailable(StatsError):
    """The input source could not be opened or read."""


class ConfigurationError(StatsError, ValueError):
    """An environment setting holds a value that cannot be used."""


class AllocationFailure(StatsError):
    """The sample buffer could not grow."""


class EmptyInput(StatsError, ValueError):
    """No values were ingested, so no statistic is defined."""

    def __init__(self, message: str = "no numeric values to analyze") -> None:
        super().__init__(message)


class DivisionByZero(StatsError, ZeroDivisionError):
    """Harmonic mean is undefined for the given values."""
