# app/rental/booking.py
from __future__ import annotations
import logging
from datetime import datetime, timezone

from app import config
from app.errors import RentalError
from app.rental.catalog import Catalog, get_catalog
from app.rental.normalize import did_you_mean
from app.rental.pricing import days_between, format_price, total_price
from app.rental.validation import validate_date_range
from app.rental.vendors import log_vendor_message, simulate_latency
from app.schemas import BookingRequest, BookingSummary, RentalOption
from app.settings import BOOKING_ID_PREFIX, DEFAULT_DISCOUNT_PERCENT, DISCOUNT_MIN_DAYS
from app.texts import AGENT_NOTE, NO_DISCOUNT_MSG, NO_SHOP_DISCOUNT_MSG

logger = logging.getLogger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(n: int) -> str:
    if n == 0:
        return "0"
    out = []
    while n:
        n, r = divmod(n, 36)
        out.append(_BASE36[r])
    return "".join(reversed(out))


def booking_id(now: datetime | None = None) -> str:
    """'VR' + epoch en milisegundos en base 36, mayúsculas. No se guarda en ningún lado."""
    now = now or datetime.now(timezone.utc)
    millis = int(now.timestamp() * 1000)
    return BOOKING_ID_PREFIX + to_base36(millis).upper()


def create_booking_summary(
    rental: RentalOption,
    bike_model: str,
    start_date: str,
    end_date: str,
) -> BookingSummary:
    bike = rental.find_bike(bike_model)
    if bike is None:
        message = f"Bike model {bike_model} not found at {rental.shop}"
        hint = did_you_mean(bike_model, [b.model for b in rental.bikes])
        raise RentalError(message + ("." + hint if hint else ""), "BIKE_NOT_FOUND")

    if not bike.available:
        raise RentalError(f"{bike_model} is not available at {rental.shop}", "BIKE_UNAVAILABLE")

    days = days_between(start_date, end_date)
    total = total_price(bike.price_per_day, days, DEFAULT_DISCOUNT_PERCENT)
    if days >= DISCOUNT_MIN_DAYS:
        discount = rental.discount or NO_SHOP_DISCOUNT_MSG
    else:
        discount = NO_DISCOUNT_MSG

    return BookingSummary(
        shop=rental.shop,
        contact=rental.contact,
        address=rental.address,
        bike=bike,
        days=days,
        daily_price=format_price(bike.price_per_day),
        total_price=format_price(total),
        requirements=rental.requirements,
        delivery=rental.delivery,
        discount=discount,
        start_date=start_date,
        end_date=end_date,
        agent_note=AGENT_NOTE,
    )


def find_rental(shop_name: str, catalog: Catalog) -> RentalOption:
    rental = catalog.find_shop(shop_name)
    if rental is None:
        hint = did_you_mean(shop_name, catalog.shop_names())
        raise RentalError(f"Shop {shop_name} not found" + ("." + hint if hint else ""), "SHOP_NOT_FOUND")
    return rental


async def confirm_booking(
    request: BookingRequest,
    catalog: Catalog | None = None,
    now: datetime | None = None,
) -> BookingSummary:
    """
    Valida fechas, busca tienda/moto (nombre exacto), arma el resumen y
    "confirma" con la tienda. Regresa el resumen con su booking_id.
    """
    catalog = catalog or get_catalog()
    validate_date_range(request.start_date, request.end_date, now=now)

    rental = find_rental(request.shop_name, catalog)
    summary = create_booking_summary(rental, request.bike_model, request.start_date, request.end_date)

    log_vendor_message(
        "booking_confirm",
        model=summary.bike.model,
        price=summary.daily_price,
        start_date=request.start_date,
        end_date=request.end_date,
    )
    await simulate_latency(config.BOOKING_DELAY_SECONDS)

    summary = summary.model_copy(update={"booking_id": booking_id(now)})
    logger.info("Booking %s confirmed: %s @ %s (%d days)",
                summary.booking_id, summary.bike.model, summary.shop, summary.days)
    return summary
