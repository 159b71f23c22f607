"""Report generation and export.

- **generator**: builds a ``Report`` from a snapshot and regressions
- **json_export / csv_export / html / markdown**: pure exporters
- **service**: ``PerformanceReportService`` and ``export_report`` dispatch
"""

from .csv_export import export_as_csv
from .generator import DEFAULT_TITLE, generate_recommendations, generate_report
from .html import HTMLReporter, export_as_html
from .json_export import export_as_json
from .markdown import export_as_markdown
from .service import ExportFormat, PerformanceReportService, export_report

__all__ = [
    "DEFAULT_TITLE",
    "generate_report",
    "generate_recommendations",
    "export_as_json",
    "export_as_csv",
    "export_as_html",
    "export_as_markdown",
    "HTMLReporter",
    "ExportFormat",
    "export_report",
    "PerformanceReportService",
]
