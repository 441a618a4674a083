# main_cli.py
from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from core.exceptions import NoDataError, ValidationError
from core.reporting import api as reporting_api
from core.services.catalog import CatalogService
from core.services.freight import FreightService
from core.services.reporting import FreightReportingService
from infra.db.base import SessionLocal, db_url
from infra.db.repositories import (
    SqlAlchemyDestinationRepository,
    SqlAlchemyFreightRepository,
    SqlAlchemySupplierRepository,
)
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id, get_operational_support
from infra.path import default_reports_dir

logger = logging.getLogger(__name__)

EXIT_NO_DATA = 1
EXIT_INVALID_INPUT = 2


def build_services(session=None) -> dict:
    session = session or SessionLocal()

    freight_repo = SqlAlchemyFreightRepository(session)
    supplier_repo = SqlAlchemySupplierRepository(session)
    destination_repo = SqlAlchemyDestinationRepository(session)

    return {
        "session": session,
        "freight_service": FreightService(session, freight_repo, supplier_repo),
        "catalog_service": CatalogService(session, supplier_repo, destination_repo),
        "reporting_service": FreightReportingService(session, freight_repo),
    }


def _iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fletes", description="Freight cost reports.")
    parser.add_argument("--format", choices=("xlsx", "pdf"), default="xlsx")
    parser.add_argument("--out", type=Path, default=None, help="output directory or file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("months", help="list months that have freight data")

    monthly = sub.add_parser("monthly", help="report for one calendar month")
    monthly.add_argument("year", type=int)
    monthly.add_argument("month", type=int)

    period = sub.add_parser("range", help="report for an inclusive date range")
    period.add_argument("start", type=_iso_date)
    period.add_argument("end", type=_iso_date)
    return parser


def run(args: argparse.Namespace, services: dict) -> int:
    reporting: FreightReportingService = services["reporting_service"]

    if args.command == "months":
        for item in reporting.months_with_data():
            print(f"{item.year}-{item.month:02d}  {item.label}")
        return 0

    try:
        if args.command == "monthly":
            model = reporting.monthly_report(args.year, args.month)
        else:
            model = reporting.range_report(args.start, args.end)
    except ValidationError as exc:
        print(f"Invalid request: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except NoDataError as exc:
        print(str(exc))
        return EXIT_NO_DATA

    output = args.out or default_reports_dir()
    render = reporting_api.render_pdf if args.format == "pdf" else reporting_api.render_excel
    path = render(model, output)
    get_operational_support().emit_event(
        event_type="report.generated",
        message=f"{model.title} written to {path}",
        data={"rows": len(model.rows), "format": args.format, "path": str(path)},
    )
    print(path)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    with bind_trace_id():
        run_migrations(db_url=db_url)
        services = build_services()
        try:
            return run(args, services)
        except Exception as exc:
            get_operational_support().capture_exception(exc, context=f"cli:{args.command}")
            logger.exception("Report command failed.")
            raise
        finally:
            services["session"].close()


if __name__ == "__main__":
    sys.exit(main())
