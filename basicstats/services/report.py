# basicstats/services/report.py
from basicstats.services.basicstats import StatsReport

__all__: list[str] = [
    "format_report",
]


def format_report(report: StatsReport) -> str:
    """
    Render a report as the plain-text results block, floats to 3 decimals.
    """
    lines = [
        "Results:",
        "--------",
        f"Num values: {report.count}",
        f"Mean: {report.mean:.3f}",
        f"Median: {report.median:.3f}",
        f"Mode: {report.mode:.3f}",
        f"Standard Deviation: {report.stddev:.3f}",
        f"Harmonic Mean: {report.harmonic_mean:.3f}",
        f"Unused array capacity: {report.unused_capacity}",
    ]
    return "\n".join(lines)
