"""Reporting API wrappers around the freight report renderers."""

from datetime import date
from pathlib import Path

from core.services.reporting import FreightReportingService, ReportModel
from core.reporting.renderers.excel import ExcelFreightReportRenderer
from core.reporting.renderers.pdf import PdfFreightReportRenderer


def _resolve_output(model: ReportModel, output: str | Path, suffix: str) -> Path:
    """
    An existing directory gets the report's own file name. Any other path is
    a file whose extension is forced to match the rendered format.
    """
    path = Path(output)
    if path.is_dir():
        path = path / f"{model.file_stem}{suffix}"
    elif path.suffix.lower() != suffix:
        path = path.with_suffix(suffix)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def render_excel(model: ReportModel, output: str | Path) -> Path:
    return ExcelFreightReportRenderer().render(model, _resolve_output(model, output, ".xlsx"))


def render_pdf(model: ReportModel, output: str | Path) -> Path:
    return PdfFreightReportRenderer().render(model, _resolve_output(model, output, ".pdf"))


def generate_monthly_excel(
    reporting_service: FreightReportingService,
    year: int,
    month: int,
    output: str | Path,
) -> Path:
    return render_excel(reporting_service.monthly_report(year, month), output)


def generate_monthly_pdf(
    reporting_service: FreightReportingService,
    year: int,
    month: int,
    output: str | Path,
) -> Path:
    return render_pdf(reporting_service.monthly_report(year, month), output)


def generate_range_excel(
    reporting_service: FreightReportingService,
    start: date,
    end: date,
    output: str | Path,
) -> Path:
    return render_excel(reporting_service.range_report(start, end), output)


def generate_range_pdf(
    reporting_service: FreightReportingService,
    start: date,
    end: date,
    output: str | Path,
) -> Path:
    return render_pdf(reporting_service.range_report(start, end), output)
