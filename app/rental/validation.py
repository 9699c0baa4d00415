# app/rental/validation.py
from __future__ import annotations
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable

from app.errors import RentalError
from app.settings import MAX_RENTAL_DAYS

ONE_DAY = timedelta(days=1)

_NON_DIGITS = re.compile(r"[^0-9]")
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Ningún precio real pasa de 15 dígitos; más que eso se satura
MAX_PRICE_DIGITS = 15
MAX_PRICE = 10 ** MAX_PRICE_DIGITS - 1


# ------------------------------------------------------------
# Argumentos requeridos
# ------------------------------------------------------------
def require(arguments: Dict[str, Any], fields: Iterable[str], code: str, message: str) -> None:
    """Falla con el MISSING_* de la operación si falta (o viene vacío) algún campo."""
    for field in fields:
        if not arguments.get(field):
            raise RentalError(message, code)


# ------------------------------------------------------------
# Precios y días
# ------------------------------------------------------------
def parse_price(value: Any) -> int:
    """
    Quita todo lo que no sea dígito: '150.000₫' -> 150000, '160k' -> 160.
    Sin dígitos -> 0 (no es error). Montos de más de MAX_PRICE_DIGITS dígitos
    se topan en MAX_PRICE.
    """
    digits = _NON_DIGITS.sub("", str(value if value is not None else "")).lstrip("0")
    if len(digits) > MAX_PRICE_DIGITS:
        return MAX_PRICE
    return int(digits) if digits else 0


def parse_days(value: Any) -> int:
    try:
        days = float(value)
    except (TypeError, ValueError):
        raise RentalError("Days must be a whole number of rental days", "INVALID_DAYS")
    if days <= 0 or not days.is_integer():
        raise RentalError("Days must be a whole number of rental days", "INVALID_DAYS")
    return int(days)


# ------------------------------------------------------------
# Fechas
# ------------------------------------------------------------
def parse_date(value: str) -> datetime:
    """
    'YYYY-MM-DD' -> datetime a medianoche UTC. Solo ese formato: fromisoformat
    también acepta '20300105', semanas ISO y horas.
    """
    text = str(value).strip() if value is not None else ""
    if not _ISO_DATE.fullmatch(text):
        raise RentalError("Invalid date format. Use YYYY-MM-DD", "INVALID_DATE_FORMAT")
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise RentalError("Invalid date format. Use YYYY-MM-DD", "INVALID_DATE_FORMAT")
    return dt.replace(tzinfo=timezone.utc)


def elapsed_days(start: datetime, end: datetime) -> int:
    # días "hacia arriba": 1 día y 1 hora cuentan como 2
    return math.ceil(abs((end - start) / ONE_DAY))


def validate_date_range(start_date: str, end_date: str, now: datetime | None = None) -> None:
    start = parse_date(start_date)
    end = parse_date(end_date)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    if start < now:
        raise RentalError("Start date cannot be in the past", "PAST_DATE")

    if end <= start:
        raise RentalError("End date must be after start date", "INVALID_DATE_RANGE")

    if elapsed_days(start, end) > MAX_RENTAL_DAYS:
        raise RentalError(f"Rental period cannot exceed {MAX_RENTAL_DAYS} days", "RENTAL_TOO_LONG")
