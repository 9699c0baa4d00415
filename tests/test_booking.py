from datetime import datetime, timezone

import pytest

from app.errors import RentalError
from app.rental.booking import booking_id, confirm_booking, create_booking_summary, to_base36
from app.schemas import BookingRequest
from app.texts import NO_DISCOUNT_MSG, NO_SHOP_DISCOUNT_MSG


@pytest.fixture()
def thanh(catalog):
    return catalog.find_shop("Thanh Xe Tốt")


def _request(**overrides):
    data = dict(
        shop_name="Thanh Xe Tốt",
        bike_model="Honda Vision",
        start_date="2030-01-05",
        end_date="2030-01-08",
        customer_name="Alex Smith",
    )
    data.update(overrides)
    return BookingRequest(**data)


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"
    assert to_base36(1000) == "rs"


def test_booking_id_format():
    assert booking_id(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == "VRRS"
    bid = booking_id()
    assert bid.startswith("VR")
    assert bid[2:].isalnum() and bid[2:] == bid[2:].upper()


def test_summary_with_discount(thanh):
    s = create_booking_summary(thanh, "Honda Vision", "2030-01-05", "2030-01-08")
    assert s.days == 3
    assert s.duration == "3 days"
    assert s.daily_price == "150.000₫"
    assert s.total_price == "405.000₫"
    assert s.discount == "10% off for 3+ days"
    assert s.bike.engine == "125cc"


def test_summary_short_rental_has_no_discount(thanh):
    s = create_booking_summary(thanh, "Yamaha Nouvo", "2030-01-05", "2030-01-07")
    assert s.days == 2
    assert s.total_price == "360.000₫"
    assert s.discount == NO_DISCOUNT_MSG


def test_unavailable_bike(thanh):
    with pytest.raises(RentalError) as e:
        create_booking_summary(thanh, "Honda SH", "2030-01-05", "2030-01-08")
    assert e.value.code == "BIKE_UNAVAILABLE"
    assert e.value.message == "Honda SH is not available at Thanh Xe Tốt"


def test_bike_not_found_suggests_close_model(thanh):
    with pytest.raises(RentalError) as e:
        create_booking_summary(thanh, "Honda Visoin", "2030-01-05", "2030-01-08")
    assert e.value.code == "BIKE_NOT_FOUND"
    assert e.value.message.startswith("Bike model Honda Visoin not found at Thanh Xe Tốt")
    assert "Did you mean Honda Vision?" in e.value.message


def test_bike_lookup_is_exact(thanh):
    with pytest.raises(RentalError) as e:
        create_booking_summary(thanh, "honda vision", "2030-01-05", "2030-01-08")
    assert e.value.code == "BIKE_NOT_FOUND"


def test_confirm_booking(run, catalog, now):
    s = run(confirm_booking(_request(), catalog=catalog, now=now))
    assert s.booking_id == booking_id(now)
    assert s.shop == "Thanh Xe Tốt"
    assert s.total_price == "405.000₫"


def test_confirm_booking_unknown_shop(run, catalog, now):
    with pytest.raises(RentalError) as e:
        run(confirm_booking(_request(shop_name="Thanh Xe Tot"), catalog=catalog, now=now))
    assert e.value.code == "SHOP_NOT_FOUND"
    assert e.value.message.startswith("Shop Thanh Xe Tot not found")
    assert "Thanh Xe Tốt" in e.value.message


def test_confirm_booking_checks_dates_first(run, catalog, now):
    with pytest.raises(RentalError) as e:
        run(confirm_booking(_request(shop_name="Nope", start_date="2029-12-01"), catalog=catalog, now=now))
    assert e.value.code == "PAST_DATE"


def test_confirm_booking_unavailable_bike(run, catalog, now):
    with pytest.raises(RentalError) as e:
        run(confirm_booking(_request(bike_model="Honda SH"), catalog=catalog, now=now))
    assert e.value.code == "BIKE_UNAVAILABLE"


def test_shop_without_discount_text(thanh):
    plain = thanh.model_copy(update={"discount": None})
    assert create_booking_summary(plain, "Honda Vision", "2030-01-05", "2030-01-08").discount == NO_SHOP_DISCOUNT_MSG
    assert create_booking_summary(plain, "Honda Vision", "2030-01-05", "2030-01-06").discount == NO_DISCOUNT_MSG
