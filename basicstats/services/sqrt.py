"""Babylonian square root used by the standard deviation."""
from __future__ import annotations

import logging
import math

__all__: list[str] = [
    "SQRT_TOLERANCE",
    "SQRT_MAX_ITERATIONS",
    "babylonian_sqrt",
]

logger = logging.getLogger(__name__)

SQRT_TOLERANCE = 1e-6
SQRT_MAX_ITERATIONS = 2000


def babylonian_sqrt(value: float) -> float:
    """
    Approximate the square root of a non-negative number.
    Averages the guess with value / guess until the two agree within
    SQRT_TOLERANCE, or until the guess stops decreasing in floating point.
    Raises ValueError for negative input.
    """
    if value < 0:
        raise ValueError("cannot take the square root of a negative number")
    if value == 0 or not math.isfinite(value):
        return float(value)

    guess = float(value)
    companion = 1.0
    for iteration in range(SQRT_MAX_ITERATIONS):
        if abs(guess - companion) <= SQRT_TOLERANCE:
            return guess
        next_guess = (guess + companion) / 2
        # After the first step the guess decreases monotonically until it hits a fixed point.
        if iteration > 0 and next_guess >= guess:
            return guess
        guess = next_guess
        companion = value / guess

    logger.warning("babylonian_sqrt(%r) did not converge after %d iterations", value, SQRT_MAX_ITERATIONS)
    return guess
