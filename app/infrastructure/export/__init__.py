"""Report file exports."""

from app.infrastructure.export.spreadsheet import SpreadsheetReportRenderer

__all__ = ["SpreadsheetReportRenderer"]
