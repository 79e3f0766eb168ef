"""Excel rendering of the weekly report.

Each sheet carries a merged title row, a "Semana de" subtitle, a blank row,
then the header row (row 4) and data from row 5. Rows are laid out with a
pandas DataFrame and styled with openpyxl.
"""

from __future__ import annotations

import io

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from app.application.dtos.report import (
    BOARD_REPORT_HEADERS,
    BOARD_SHEET_NAME,
    TASK_REPORT_HEADERS,
    TASK_SHEET_NAME,
    BoardReportRow,
    TaskReportRow,
    WeeklyReport,
    row_values,
)
from app.infrastructure.exceptions import ReportRenderException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
REPORT_TITLE = "Vontta - Relatório Semanal"
HEADER_ROW = 4
COLUMN_WIDTH = 25

_TITLE_FILL = PatternFill(start_color="1E293B", end_color="1E293B", fill_type="solid")
_TITLE_FONT = Font(color="FFFFFF", bold=True, size=16)
_HEADER_FILL = PatternFill(start_color="3B82F6", end_color="3B82F6", fill_type="solid")
_HEADER_FONT = Font(color="FFFFFF", bold=True)
_THIN = Side(style="thin", color="000000")
_HEADER_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)


def _frame(
    rows: tuple[TaskReportRow, ...] | tuple[BoardReportRow, ...],
    headers: dict[str, str],
) -> pd.DataFrame:
    return pd.DataFrame([row_values(r) for r in rows], columns=list(headers.values()))


def _style_sheet(sheet: Worksheet, column_count: int, week_label: str) -> None:
    sheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=column_count)
    title = sheet.cell(row=1, column=1, value=REPORT_TITLE)
    title.fill = _TITLE_FILL
    title.font = _TITLE_FONT
    title.alignment = Alignment(horizontal="center", vertical="center")
    sheet.row_dimensions[1].height = 30

    sheet.cell(row=2, column=1, value=f"Semana de: {week_label}").font = Font(italic=True)

    for col in range(1, column_count + 1):
        cell = sheet.cell(row=HEADER_ROW, column=col)
        cell.fill = _HEADER_FILL
        cell.font = _HEADER_FONT
        cell.border = _HEADER_BORDER
        cell.alignment = Alignment(horizontal="center")
        sheet.column_dimensions[cell.column_letter].width = COLUMN_WIDTH


def _keep_text(sheet: Worksheet) -> None:
    """Store data cells that start with "=" as strings, not formulas."""
    for row in sheet.iter_rows(min_row=HEADER_ROW + 1):
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"


class SpreadsheetReportRenderer:
    """Render a WeeklyReport as an .xlsx workbook with one sheet per row-set."""

    media_type = XLSX_MEDIA_TYPE

    def filename(self, report: WeeklyReport) -> str:
        return f"Vontta_Relatorio_{report.week_label.replace('/', '-')}.xlsx"

    def render(self, report: WeeklyReport) -> bytes:
        """Return the workbook bytes.

        Raises:
            ReportRenderException: pandas or openpyxl failed to write the file.
        """
        sheets = (
            (TASK_SHEET_NAME, _frame(report.task_rows, TASK_REPORT_HEADERS)),
            (BOARD_SHEET_NAME, _frame(report.board_rows, BOARD_REPORT_HEADERS)),
        )
        buffer = io.BytesIO()
        try:
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                for name, frame in sheets:
                    frame.to_excel(
                        writer, sheet_name=name, index=False, startrow=HEADER_ROW - 1
                    )
                    _keep_text(writer.sheets[name])
                    _style_sheet(writer.sheets[name], len(frame.columns), report.week_label)
        except (ValueError, OSError) as e:
            logger.error("Report rendering failed for %s: %s", report.history_id, e)
            raise ReportRenderException(report.history_id, str(e)) from e
        return buffer.getvalue()
