"""CSV rendering of a report.

Sections are written in a fixed order; the slowest-operations,
regressions, and recommendations sections are omitted when empty.
"""

import csv
import io

from ..models import Report
from .formatting import iso_timestamp, ms, percent


def export_as_csv(report: Report) -> str:
    """Render a report as CSV text.

    Args:
        report: Report to render.

    Returns:
        CSV document with ``\\n`` line endings.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    summary = report.summary

    writer.writerow([report.title])
    writer.writerow([f"Generated: {iso_timestamp(report.timestamp)}"])
    writer.writerow([])

    writer.writerow(["Summary"])
    writer.writerow(["Total Metrics", summary.total_metrics])
    writer.writerow(["Total Duration (ms)", ms(summary.total_duration)])
    writer.writerow(["Average Duration (ms)", ms(summary.average_metric_duration)])
    writer.writerow(
        ["Slowest Operation", summary.slowest_metric.name, ms(summary.slowest_metric.duration)]
    )
    writer.writerow(
        ["Fastest Operation", summary.fastest_metric.name, ms(summary.fastest_metric.duration)]
    )
    writer.writerow([])

    writer.writerow(["Performance by Category"])
    writer.writerow(
        ["Category", "Count", "Average (ms)", "Min (ms)", "Max (ms)", "P95 (ms)", "P99 (ms)"]
    )
    for category, stats in report.by_category.items():
        writer.writerow(
            [
                category,
                stats.count,
                ms(stats.average),
                ms(stats.min),
                ms(stats.max),
                ms(stats.p95),
                ms(stats.p99),
            ]
        )
    writer.writerow([])

    if report.slowest_operations:
        writer.writerow(["Slowest Operations"])
        writer.writerow(["Name", "Duration (ms)", "Category", "Timestamp"])
        for op in report.slowest_operations:
            writer.writerow([op.name, ms(op.duration), op.category, iso_timestamp(op.timestamp)])
        writer.writerow([])

    if report.regressions:
        writer.writerow(["Performance Regressions"])
        writer.writerow(
            ["Metric", "Previous Avg (ms)", "Current Avg (ms)", "Change (%)", "Severity"]
        )
        for r in report.regressions:
            writer.writerow(
                [
                    r.metric_name,
                    ms(r.previous_average),
                    ms(r.current_average),
                    percent(r.percentage_change),
                    r.severity.value,
                ]
            )
        writer.writerow([])

    if report.recommendations:
        writer.writerow(["Recommendations"])
        for rec in report.recommendations:
            writer.writerow([f"- {rec}"])

    return buffer.getvalue()


__all__ = ["export_as_csv"]
