from __future__ import annotations

from datetime import date, datetime

import pytest

from core.exceptions import NoDataError, ValidationError
from core.models import DateRangePeriod, MonthPeriod


def test_monthly_report_single_record_example(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 3, 10), destination_cost=500, highway=50, stay=20, trip_number=12)

    report = rs.monthly_report(2024, 3)

    assert report.title == "FREIGHT REPORT - MARCH 2024"
    assert report.file_stem == "Freight_Report_March_2024"
    assert len(report.rows) == 1
    row = report.rows[0]
    assert row.week_label == "08 Mar.-14 Mar"
    assert row.total_cost == 570
    assert row.trip_number == 12
    assert row.date_label == "10/03/2024"
    assert report.totals is None


def test_range_report_totals_example(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 3, 4), destination="MONTERREY", destination_cost=500, highway=50, stay=20)
    add_trip(datetime(2024, 3, 28), destination="SALTILLO", destination_cost=300, highway=0, stay=10)

    report = rs.range_report(date(2024, 3, 1), date(2024, 3, 31))

    assert report.title == "FREIGHT REPORT - FROM 01/03/2024 TO 31/03/2024"
    assert report.file_stem == "Freight_Report_20240301_20240331"
    assert report.totals is not None
    assert report.totals.destination_cost == 800
    assert report.totals.highway_cost == 50
    assert report.totals.stay_cost == 30
    assert report.totals.total_cost == 880


def test_monthly_ordering_date_ascending_then_newest_id(services, add_trip):
    rs = services["reporting_service"]
    late = add_trip(datetime(2024, 3, 20))
    same_day_a = add_trip(datetime(2024, 3, 5))
    same_day_b = add_trip(datetime(2024, 3, 5))
    early = add_trip(datetime(2024, 3, 1))

    ids = [row.freight_id for row in rs.monthly_report(2024, 3).rows]

    assert ids == [early.id, same_day_b.id, same_day_a.id, late.id]


def test_range_ordering_date_ascending_then_oldest_id(services, add_trip):
    rs = services["reporting_service"]
    late = add_trip(datetime(2024, 3, 20))
    same_day_a = add_trip(datetime(2024, 3, 5))
    same_day_b = add_trip(datetime(2024, 3, 5))
    early = add_trip(datetime(2024, 3, 1))

    ids = [row.freight_id for row in rs.range_report(date(2024, 3, 1), date(2024, 3, 31)).rows]

    assert ids == [early.id, same_day_a.id, same_day_b.id, late.id]


def test_range_filter_ignores_time_of_day_and_is_inclusive(services, add_trip):
    rs = services["reporting_service"]
    before = add_trip(datetime(2024, 2, 29, 23, 59))
    start_edge = add_trip(datetime(2024, 3, 1, 0, 0))
    end_edge = add_trip(datetime(2024, 3, 31, 23, 59, 59))
    after = add_trip(datetime(2024, 4, 1, 0, 0))
    add_trip(None)

    ids = {row.freight_id for row in rs.range_report(date(2024, 3, 1), date(2024, 3, 31)).rows}

    assert ids == {start_edge.id, end_edge.id}
    assert before.id not in ids and after.id not in ids


def test_month_filter_excludes_neighbouring_months_and_undated(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2023, 12, 31, 23, 0))
    inside = add_trip(datetime(2024, 1, 15))
    add_trip(datetime(2024, 2, 1))
    add_trip(None)

    report = rs.monthly_report(2024, 1)

    assert [row.freight_id for row in report.rows] == [inside.id]


def test_december_month_bounds(services, add_trip):
    rs = services["reporting_service"]
    dec = add_trip(datetime(2024, 12, 31, 18, 0))
    add_trip(datetime(2025, 1, 1))

    assert [row.freight_id for row in rs.monthly_report(2024, 12).rows] == [dec.id]


@pytest.mark.parametrize("year,month", [(2024, 13), (2024, 0), (1999, 5), (2101, 1)])
def test_monthly_report_rejects_out_of_range_period(services, year, month):
    with pytest.raises(ValidationError) as exc:
        services["reporting_service"].monthly_report(year, month)
    assert exc.value.code == "INVALID_PERIOD"


def test_range_report_rejects_inverted_range(services):
    with pytest.raises(ValidationError) as exc:
        services["reporting_service"].range_report(date(2024, 3, 31), date(2024, 3, 1))
    assert exc.value.code == "INVALID_DATE_RANGE"


def test_empty_periods_raise_no_data(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 3, 10))

    with pytest.raises(NoDataError) as exc:
        rs.monthly_report(2024, 4)
    assert exc.value.code == "NO_DATA"

    with pytest.raises(NoDataError):
        rs.range_report(date(2024, 4, 1), date(2024, 4, 30))


def test_excused_supplier_rows_only_carry_destination_cost(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 3, 10), supplier="Recoleccion por Cliente", destination_cost=400, highway=75, stay=30)

    row = rs.monthly_report(2024, 3).rows[0]

    assert (row.destination_cost, row.highway_cost, row.stay_cost, row.total_cost) == (400, 0, 0, 400)


def test_missing_references_render_placeholders(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 3, 10), supplier=None, destination=None, highway=25)

    row = rs.monthly_report(2024, 3).rows[0]

    assert row.supplier_name == "N/A"
    assert row.destination_name == "N/A"
    assert row.trip_number == 0
    assert row.destination_cost == 0
    assert row.total_cost == 25


def test_months_with_data_descending(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2024, 1, 15))
    add_trip(datetime(2024, 3, 2))
    add_trip(datetime(2024, 3, 30))
    add_trip(None)

    months = rs.months_with_data()

    assert [(m.year, m.month) for m in months] == [(2024, 3), (2024, 1)]
    assert months[0].month_name == "March"
    assert months[0].label == "March 2024"


def test_months_with_data_orders_years_before_months(services, add_trip):
    rs = services["reporting_service"]
    add_trip(datetime(2023, 12, 1))
    add_trip(datetime(2024, 2, 1))
    add_trip(datetime(2023, 11, 1))

    assert [(m.year, m.month) for m in rs.months_with_data()] == [(2024, 2), (2023, 12), (2023, 11)]


def test_months_with_data_empty_is_not_an_error(services):
    assert services["reporting_service"].months_with_data() == []


@pytest.mark.parametrize("year,month", [(2024, True), (True, 3), (2024, 3.0), ("2024", 3)])
def test_month_period_requires_plain_integers(year, month):
    with pytest.raises(ValidationError) as exc:
        MonthPeriod(year=year, month=month)
    assert exc.value.code == "INVALID_PERIOD"


def test_period_membership_matches_storage_bounds(services, add_trip):
    rs = services["reporting_service"]
    stamps = [
        datetime(2024, 2, 29, 23, 59),
        datetime(2024, 3, 1, 0, 0),
        datetime(2024, 3, 15, 12, 30),
        datetime(2024, 3, 31, 23, 59, 59),
        datetime(2024, 4, 1, 0, 0),
    ]
    by_id = {add_trip(stamp).id: stamp for stamp in stamps}
    month = MonthPeriod(year=2024, month=3)
    span = DateRangePeriod(start=date(2024, 3, 1), end=date(2024, 3, 31))

    monthly_ids = {row.freight_id for row in rs.monthly_report(2024, 3).rows}
    range_ids = {row.freight_id for row in rs.range_report(span.start, span.end).rows}

    assert monthly_ids == {fid for fid, stamp in by_id.items() if month.contains(stamp)}
    assert range_ids == {fid for fid, stamp in by_id.items() if span.contains(stamp)}
    assert span.contains(date(2024, 3, 31)) and not span.contains(date(2024, 4, 1))
    assert month.contains(datetime(2024, 3, 31, 23, 59)) and not month.contains(date(2024, 2, 29))
