# basicstats/services/reader.py
import re
from typing import Iterable, Iterator, TextIO

__all__: list[str] = [
    "NUMBER_RE",
    "iter_values",
    "parse_values",
]

# ASCII decimal floats with optional exponent, plus signed inf/infinity.
# float() alone would also take "1_000", non-ASCII digits and "nan".
NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)",
    re.ASCII | re.IGNORECASE,
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def parse_values(tokens: Iterable[str]) -> Iterator[float]:
    """
    Parse tokens as floats, stopping silently at the first one that is not a number.
    """
    for token in tokens:
        if not NUMBER_RE.fullmatch(token):
            return
        yield float(token)


def iter_values(stream: TextIO) -> Iterator[float]:
    """Lazily read whitespace-separated numbers from a text stream."""
    return parse_values(_tokens(stream))
