"""Report generation and export behind one object."""

from collections.abc import Callable, Sequence
from enum import Enum

from ..models import RegressionAlert, Report, Snapshot
from .csv_export import export_as_csv
from .generator import DEFAULT_TITLE, generate_report
from .html import export_as_html
from .json_export import export_as_json
from .markdown import export_as_markdown


class ExportFormat(str, Enum):
    """Supported report output formats."""

    JSON = "json"
    CSV = "csv"
    HTML = "html"
    MARKDOWN = "markdown"


_EXPORTERS: dict[ExportFormat, Callable[[Report], str]] = {
    ExportFormat.JSON: export_as_json,
    ExportFormat.CSV: export_as_csv,
    ExportFormat.HTML: export_as_html,
    ExportFormat.MARKDOWN: export_as_markdown,
}


def export_report(report: Report, fmt: ExportFormat | str) -> str:
    """Render a report in the requested format.

    Raises:
        ValueError: If ``fmt`` is not a known format.
    """
    return _EXPORTERS[ExportFormat(fmt)](report)


class PerformanceReportService:
    """Stateless report builder and exporter.

    Example:
        service = PerformanceReportService()
        report = service.generate_report(monitor.create_snapshot(),
                                         monitor.detect_regressions())
        markdown = service.export_as_markdown(report)
    """

    def generate_report(
        self,
        snapshot: Snapshot,
        regressions: Sequence[RegressionAlert] = (),
        title: str = DEFAULT_TITLE,
    ) -> Report:
        return generate_report(snapshot, regressions, title)

    def export(self, report: Report, fmt: ExportFormat | str) -> str:
        return export_report(report, fmt)

    def export_as_json(self, report: Report) -> str:
        return export_as_json(report)

    def export_as_csv(self, report: Report) -> str:
        return export_as_csv(report)

    def export_as_html(self, report: Report) -> str:
        return export_as_html(report)

    def export_as_markdown(self, report: Report) -> str:
        return export_as_markdown(report)


__all__ = ["ExportFormat", "export_report", "PerformanceReportService"]
