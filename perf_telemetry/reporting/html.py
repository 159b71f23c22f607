"""HTML reporter for performance reports.

Produces a self-contained document with inline styles and no external
resources. Regression rows are colored by severity, and the
slowest-operations, regressions, and recommendations sections are left
out of the markup entirely when they have no rows.
"""

import html

from ..models import CategoryStats, RegressionAlert, Report, SlowOperation
from .formatting import iso_timestamp, ms, percent


class HTMLReporter:
    """Renders a ``Report`` as a standalone HTML page."""

    # Row background per regression severity
    SEVERITY_CLASSES = {
        "critical": "regression-critical",
        "warning": "regression-warning",
    }

    def _escape(self, text: object) -> str:
        """HTML escape text."""
        return html.escape(str(text))

    def _render_css(self) -> str:
        """Render CSS styles."""
        return """
    <style>
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 20px; color: #1f2937; }
        h1 { color: #333; }
        h2 { color: #666; margin-top: 30px; border-bottom: 2px solid #007acc; padding-bottom: 10px; }
        table { border-collapse: collapse; width: 100%; margin: 15px 0; }
        th, td { border: 1px solid #ddd; padding: 12px; text-align: left; }
        th { background-color: #007acc; color: white; }
        tr:nth-child(even) { background-color: #f5f5f5; }
        .summary-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(250px, 1fr)); gap: 15px; margin: 15px 0; }
        .summary-card { background: #f0f0f0; padding: 15px; border-radius: 5px; }
        .summary-card strong { display: block; color: #007acc; }
        tr.regression-critical, tr.regression-critical:nth-child(even) { background-color: #ffe6e6; }
        tr.regression-warning, tr.regression-warning:nth-child(even) { background-color: #fff3cd; }
        .recommendation { background: #e7f3ff; padding: 10px; margin: 5px 0; border-left: 4px solid #007acc; }
        .timestamp { color: #999; font-size: 0.9em; }
    </style>"""

    def _render_card(self, label: str, value: str) -> str:
        return f"""
        <div class="summary-card">
            <strong>{label}</strong>
            {value}
        </div>"""

    def _render_summary(self, report: Report) -> str:
        """Render the summary card grid."""
        summary = report.summary
        slowest = summary.slowest_metric
        fastest = summary.fastest_metric
        cards = "".join(
            [
                self._render_card("Total Metrics", str(summary.total_metrics)),
                self._render_card("Total Duration", f"{ms(summary.total_duration)} ms"),
                self._render_card(
                    "Average Duration", f"{ms(summary.average_metric_duration)} ms"
                ),
                self._render_card(
                    "Slowest Operation",
                    f"{self._escape(slowest.name)} ({ms(slowest.duration)} ms)",
                ),
                self._render_card(
                    "Fastest Operation",
                    f"{self._escape(fastest.name)} ({ms(fastest.duration)} ms)",
                ),
            ]
        )
        return f"""
    <h2>Summary</h2>
    <div class="summary-grid">{cards}
    </div>"""

    def _render_table(self, headers: list[str], rows: list[str]) -> str:
        header_cells = "".join(f"<th>{h}</th>" for h in headers)
        return f"""
    <table>
        <thead>
            <tr>{header_cells}</tr>
        </thead>
        <tbody>{"".join(rows)}
        </tbody>
    </table>"""

    def _render_category_row(self, category: str, stats: CategoryStats) -> str:
        cells = [
            self._escape(category),
            str(stats.count),
            ms(stats.average),
            ms(stats.min),
            ms(stats.max),
            ms(stats.p95),
            ms(stats.p99),
        ]
        return "\n            <tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"

    def _render_categories(self, report: Report) -> str:
        rows = [
            self._render_category_row(category, stats)
            for category, stats in report.by_category.items()
        ]
        table = self._render_table(
            ["Category", "Count", "Average (ms)", "Min (ms)", "Max (ms)", "P95 (ms)", "P99 (ms)"],
            rows,
        )
        return f"""
    <h2>Performance by Category</h2>{table}"""

    def _render_slow_row(self, op: SlowOperation) -> str:
        cells = [
            self._escape(op.name),
            ms(op.duration),
            self._escape(op.category),
            iso_timestamp(op.timestamp),
        ]
        return "\n            <tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"

    def _render_slowest(self, report: Report) -> str:
        if not report.slowest_operations:
            return ""
        rows = [self._render_slow_row(op) for op in report.slowest_operations]
        table = self._render_table(["Name", "Duration (ms)", "Category", "Timestamp"], rows)
        return f"""
    <h2>Slowest Operations</h2>{table}"""

    def _render_regression_row(self, regression: RegressionAlert) -> str:
        css_class = self.SEVERITY_CLASSES[regression.severity.value]
        cells = [
            self._escape(regression.metric_name),
            ms(regression.previous_average),
            ms(regression.current_average),
            percent(regression.percentage_change),
            regression.severity.value,
        ]
        return (
            f'\n            <tr class="{css_class}">'
            + "".join(f"<td>{c}</td>" for c in cells)
            + "</tr>"
        )

    def _render_regressions(self, report: Report) -> str:
        if not report.regressions:
            return ""
        rows = [self._render_regression_row(r) for r in report.regressions]
        table = self._render_table(
            ["Metric", "Previous Avg (ms)", "Current Avg (ms)", "Change (%)", "Severity"],
            rows,
        )
        return f"""
    <h2>Performance Regressions</h2>{table}"""

    def _render_recommendations(self, report: Report) -> str:
        if not report.recommendations:
            return ""
        items = "".join(
            f'\n        <div class="recommendation">{self._escape(rec)}</div>'
            for rec in report.recommendations
        )
        return f"""
    <h2>Recommendations</h2>
    <div>{items}
    </div>"""

    def render(self, report: Report) -> str:
        """Render the complete HTML document.

        Args:
            report: Report to render.

        Returns:
            HTML text. Identical reports give identical output.
        """
        title = self._escape(report.title)
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>{self._render_css()}
</head>
<body>
    <h1>{title}</h1>
    <p class="timestamp">Generated: {iso_timestamp(report.timestamp)}</p>
{self._render_summary(report)}{self._render_categories(report)}{self._render_slowest(report)}{self._render_regressions(report)}{self._render_recommendations(report)}
</body>
</html>
"""


def export_as_html(report: Report) -> str:
    """Render a report as a self-contained HTML document."""
    return HTMLReporter().render(report)


__all__ = ["HTMLReporter", "export_as_html"]
