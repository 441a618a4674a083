from pathlib import Path
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib import colors
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)
from reportlab.lib.styles import getSampleStyleSheet

from core.services.reporting.models import ReportModel


def _money(value: int) -> str:
    return f"$ {value:,}"


class PdfFreightReportRenderer:
    def render(self, model: ReportModel, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=landscape(A4),
            leftMargin=30,
            rightMargin=30,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        story.append(Paragraph(model.title, styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Rows ----------------
        data = [list(model.headers)]
        for r in model.rows:
            data.append([
                r.supplier_name,
                r.week_label,
                r.destination_name,
                r.trip_number,
                _money(r.destination_cost),
                _money(r.highway_cost),
                _money(r.stay_cost),
                _money(r.total_cost),
                r.date_label,
            ])

        style = [
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ALIGN", (3, 1), (7, -1), "RIGHT"),
        ]

        # ---------------- Totals ----------------
        if model.totals is not None:
            t = model.totals
            data.append([
                "", "", "", "TOTALS:",
                _money(t.destination_cost),
                _money(t.highway_cost),
                _money(t.stay_cost),
                _money(t.total_cost),
                "",
            ])
            style.extend([
                ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                ("BACKGROUND", (4, -1), (7, -1), colors.lightblue),
            ])

        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle(style))
        story.append(table)

        doc.build(story)
        return output_path
