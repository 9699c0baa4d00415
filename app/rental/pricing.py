# app/rental/pricing.py
from __future__ import annotations
import math

from app.rental.validation import elapsed_days, parse_date
from app.settings import CURRENCY_SYMBOL, DISCOUNT_MIN_DAYS


def round_half_up(x: float) -> int:
    # round() de Python redondea al par (2.5 -> 2); aquí 2.5 -> 3
    return int(math.floor(x + 0.5))


def days_between(start_date: str, end_date: str) -> int:
    """Días de renta: techo del tiempo transcurrido entre ambas fechas."""
    return elapsed_days(parse_date(start_date), parse_date(end_date))


def total_price(daily_price: int, days: int, discount_percent: float | None = None) -> int:
    """
    Precio total = diario × días.
    El descuento (en %) solo aplica a rentas de DISCOUNT_MIN_DAYS días o más.
    """
    base_total = int(daily_price) * int(days)
    if discount_percent and days >= DISCOUNT_MIN_DAYS:
        return round_half_up(base_total * (1 - float(discount_percent) / 100))
    return base_total


def format_price(price: int) -> str:
    """150000 -> '150.000₫' (agrupación vi-VN)."""
    return f"{int(price):,}".replace(",", ".") + CURRENCY_SYMBOL
