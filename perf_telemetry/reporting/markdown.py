"""Markdown rendering of a report."""

from ..models import Report
from .formatting import iso_timestamp, ms, percent

# Slowest-operations rows rendered, whatever the report holds
MAX_SLOWEST_ROWS = 10


def _row(cells: list[object]) -> str:
    return "| " + " | ".join(str(c) for c in cells) + " |"


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def export_as_markdown(report: Report) -> str:
    """Render a report as Markdown with pipe tables.

    Args:
        report: Report to render.

    Returns:
        Markdown text ending with a newline.
    """
    summary = report.summary
    lines: list[str] = [
        f"# {report.title}",
        f"**Generated:** {iso_timestamp(report.timestamp)}",
        "",
        "## Summary",
        f"- **Total Metrics:** {summary.total_metrics}",
        f"- **Total Duration:** {ms(summary.total_duration)} ms",
        f"- **Average Duration:** {ms(summary.average_metric_duration)} ms",
        f"- **Slowest Operation:** {summary.slowest_metric.name} "
        f"({ms(summary.slowest_metric.duration)} ms)",
        f"- **Fastest Operation:** {summary.fastest_metric.name} "
        f"({ms(summary.fastest_metric.duration)} ms)",
        "",
        "## Performance by Category",
        "| Category | Count | Average (ms) | Min (ms) | Max (ms) | P95 (ms) | P99 (ms) |",
        "|----------|-------|--------------|----------|----------|----------|----------|",
    ]
    for category, stats in report.by_category.items():
        lines.append(
            _row(
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
        )
    lines.append("")

    if report.slowest_operations:
        lines.append("## Slowest Operations")
        lines.append("| Name | Duration (ms) | Category |")
        lines.append("|------|---------------|----------|")
        for op in report.slowest_operations[:MAX_SLOWEST_ROWS]:
            lines.append(_row([_escape_cell(op.name), ms(op.duration), op.category]))
        lines.append("")

    if report.regressions:
        lines.append("## Performance Regressions")
        lines.append("| Metric | Previous (ms) | Current (ms) | Change (%) | Severity |")
        lines.append("|--------|---------------|--------------|------------|----------|")
        for r in report.regressions:
            lines.append(
                _row(
                    [
                        _escape_cell(r.metric_name),
                        ms(r.previous_average),
                        ms(r.current_average),
                        percent(r.percentage_change),
                        r.severity.value,
                    ]
                )
            )
        lines.append("")

    if report.recommendations:
        lines.append("## Recommendations")
        lines.extend(f"- {rec}" for rec in report.recommendations)
        lines.append("")

    return "\n".join(lines)


__all__ = ["MAX_SLOWEST_ROWS", "export_as_markdown"]
