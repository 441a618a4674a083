from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from core.services.reporting.models import ReportModel

MONEY_FORMAT = "$ #,##0"

HEADER_ROW = 3
FIRST_DATA_ROW = 4
TRIP_NUMBER_COL = 4
MONEY_COLS = (5, 6, 7, 8)


class ExcelFreightReportRenderer:
    def render(self, model: ReportModel, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="D3D3D3")
        totals_fill = PatternFill("solid", fgColor="ADD8E6")

        ws = wb.active
        ws.title = model.sheet_name[:31]

        column_count = len(model.headers)
        ws.cell(row=1, column=1, value=model.title).font = title_font
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=column_count)

        for col_index, h in enumerate(model.headers, start=1):
            cell = ws.cell(row=HEADER_ROW, column=col_index, value=h)
            cell.font = header_font
            cell.alignment = center
            cell.fill = header_fill
            cell.border = thin_border

        row = FIRST_DATA_ROW
        for report_row in model.rows:
            for col_index, value in enumerate(report_row.as_values(), start=1):
                cell = ws.cell(row=row, column=col_index, value=value)
                cell.border = thin_border
                if col_index in MONEY_COLS:
                    cell.number_format = MONEY_FORMAT
            row += 1

        if model.totals is not None:
            last_data_row = row - 1
            label = ws.cell(row=row, column=TRIP_NUMBER_COL, value="TOTALS:")
            label.font = header_font
            for col_index in MONEY_COLS:
                letter = get_column_letter(col_index)
                cell = ws.cell(
                    row=row,
                    column=col_index,
                    value=f"=SUM({letter}{FIRST_DATA_ROW}:{letter}{last_data_row})",
                )
                cell.font = header_font
                cell.fill = totals_fill
                cell.number_format = MONEY_FORMAT
                cell.border = thin_border

        # openpyxl has no auto-fit; size columns from the longest rendered value
        for col_index, header in enumerate(model.headers, start=1):
            values = [str(header)] + [str(r.as_values()[col_index - 1]) for r in model.rows]
            width = max(len(v) for v in values) + 4
            ws.column_dimensions[get_column_letter(col_index)].width = min(max(width, 12), 45)

        wb.save(output_path)
        return output_path
