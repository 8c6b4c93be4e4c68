"""CLI entrypoint: basicstats <input>."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from basicstats import config
from basicstats.observability.logging import setup_logging
from basicstats.services.basicstats import analyze_file
from basicstats.services.errors import StatsError, UsageError
from basicstats.services.report import format_report

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Raise UsageError instead of exiting so main() owns the exit status."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(f"{message}\n{self.format_usage().strip()}")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="basicstats",
        description="Compute mean, median, mode, standard deviation and harmonic mean of the numbers in a file.",
        epilog="Reading stops at the first token that is not a number.",
    )
    parser.add_argument("input", help='Path to a file of whitespace-separated numbers, or "-" for stdin')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        setup_logging(config.log_level(config.CLI_LOG_LEVEL), stream=sys.stderr)
        args = parser.parse_args(argv)
        report = analyze_file(args.input, max_capacity=config.max_capacity())
    except StatsError as exc:
        logger.debug("Run aborted: %r", exc)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return exc.exit_code

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
