from datetime import date, datetime, timedelta, timezone

import pytest

from app.errors import RentalError
from app.rental.pricing import days_between
from app.rental.validation import (
    MAX_PRICE,
    MAX_PRICE_DIGITS,
    elapsed_days,
    parse_date,
    parse_days,
    parse_price,
    require,
    validate_date_range,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("150000", 150000),
        ("150.000₫", 150000),
        ("150,000 VND", 150000),
        (160000, 160000),
        ("abc", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_price_strips_non_digits(raw, expected):
    assert parse_price(raw) == expected


@pytest.mark.parametrize("raw, expected", [("7", 7), (7, 7), (3.0, 3)])
def test_parse_days_ok(raw, expected):
    assert parse_days(raw) == expected


@pytest.mark.parametrize("raw", ["abc", 0, -2, 2.5, None])
def test_parse_days_invalid(raw):
    with pytest.raises(RentalError) as e:
        parse_days(raw)
    assert e.value.code == "INVALID_DAYS"


def test_require_raises_operation_code():
    with pytest.raises(RentalError) as e:
        require({"city": ""}, ["city"], "MISSING_CITY", "City is required")
    assert e.value.code == "MISSING_CITY"
    assert e.value.status_code == 400

    # con todo presente no falla
    require({"city": "Hanoi"}, ["city"], "MISSING_CITY", "City is required")


@pytest.mark.parametrize("span", range(1, 31))
def test_valid_ranges_pass(span, now):
    start = "2030-01-05"
    end = (date(2030, 1, 5) + timedelta(days=span)).isoformat()
    validate_date_range(start, end, now=now)
    assert days_between(start, end) == span
    assert days_between(start, end) >= 1


@pytest.mark.parametrize(
    "start, end",
    [("2030-01-10", "2030-01-10"), ("2030-01-10", "2030-01-09"), ("2030-02-01", "2030-01-15")],
)
def test_end_not_after_start(start, end, now):
    with pytest.raises(RentalError) as e:
        validate_date_range(start, end, now=now)
    assert e.value.code == "INVALID_DATE_RANGE"


@pytest.mark.parametrize("end", ["2030-02-05", "2030-03-01", "2030-12-31"])
def test_rental_too_long(end, now):
    with pytest.raises(RentalError) as e:
        validate_date_range("2030-01-05", end, now=now)
    assert e.value.code == "RENTAL_TOO_LONG"


def test_thirty_days_is_allowed(now):
    validate_date_range("2030-01-05", "2030-02-04", now=now)


@pytest.mark.parametrize(
    "start, end",
    [("2030/01/05", "2030-01-10"), ("2030-01-05", "tomorrow"), ("", "2030-01-10")],
)
def test_invalid_date_format(start, end, now):
    with pytest.raises(RentalError) as e:
        validate_date_range(start, end, now=now)
    assert e.value.code == "INVALID_DATE_FORMAT"


def test_format_checked_before_past_date(now):
    with pytest.raises(RentalError) as e:
        validate_date_range("2000-01-01", "not-a-date", now=now)
    assert e.value.code == "INVALID_DATE_FORMAT"


@pytest.mark.parametrize("start", ["2029-12-31", "2030-01-01"])
def test_past_start_date(start, now):
    # "2030-01-01" es medianoche UTC, antes de NOW (12:00)
    with pytest.raises(RentalError) as e:
        validate_date_range(start, "2030-01-10", now=now)
    assert e.value.code == "PAST_DATE"


def test_naive_now_is_treated_as_utc(now):
    validate_date_range("2030-01-05", "2030-01-10", now=now.replace(tzinfo=None))


# ---------- montos enormes y formato estricto de fecha ----------
def test_parse_price_saturates_huge_amounts():
    assert parse_price("9" * 5000) == MAX_PRICE
    assert parse_price("1" * 5000 + " VND") == MAX_PRICE
    assert parse_price("9" * MAX_PRICE_DIGITS) == MAX_PRICE
    assert parse_price("12345678901234567890") == MAX_PRICE


def test_parse_price_leading_zeros_do_not_count():
    assert parse_price("0" * 5000 + "150000") == 150000
    assert parse_price("000") == 0


@pytest.mark.parametrize(
    "raw",
    ["20300105", "2030-W02-1", "2030-01-05T10:00", "2030-01-05 10:00", "2030-1-5", "2030-02-30", "٢٠٣٠-٠١-٠٥", None],
)
def test_parse_date_only_accepts_calendar_dates(raw):
    with pytest.raises(RentalError) as e:
        parse_date(raw)
    assert e.value.code == "INVALID_DATE_FORMAT"


def test_parse_date_is_utc_midnight():
    assert parse_date(" 2030-01-05 ") == datetime(2030, 1, 5, tzinfo=timezone.utc)


def test_compact_date_rejected_by_range_check(now):
    with pytest.raises(RentalError) as e:
        validate_date_range("20300105", "2030-01-10", now=now)
    assert e.value.code == "INVALID_DATE_FORMAT"


def test_elapsed_days_rounds_up():
    start = datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert elapsed_days(start, start + timedelta(days=1, hours=1)) == 2
    assert elapsed_days(start + timedelta(days=3), start) == 3
