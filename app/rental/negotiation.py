# app/rental/negotiation.py
from __future__ import annotations
import logging
import random
from typing import Any, Tuple

from app import config
from app.errors import RentalError
from app.rental.pricing import format_price, round_half_up
from app.rental.validation import parse_price
from app.rental.vendors import log_vendor_message, simulate_latency
from app.schemas import NegotiationResult
from app.settings import (
    NEGOTIATION_BASE_RATE,
    NEGOTIATION_COMPROMISE_SHARE,
    NEGOTIATION_DISCOUNT_WEIGHT,
    NEGOTIATION_MAX_RATE,
    NEGOTIATION_MULTIDAY_BONUS,
    NEGOTIATION_WEEKLY_BONUS,
)
from app.texts import NEGOTIATION_COMPROMISE_MSG, NEGOTIATION_SUCCESS_MSG

logger = logging.getLogger(__name__)

_rng = random.Random()


def duration_bonus(days: int) -> float:
    if days >= 7:
        return NEGOTIATION_WEEKLY_BONUS
    if days >= 3:
        return NEGOTIATION_MULTIDAY_BONUS
    return 0.0


def success_rate(current: int, target: int, days: int) -> float:
    """
    Probabilidad de que la tienda acepte el precio pedido.
    Puede quedar negativa si el descuento es muy grande (entonces nunca acepta).
    """
    discount_fraction = (current - target) / current
    return min(
        NEGOTIATION_MAX_RATE,
        NEGOTIATION_BASE_RATE + duration_bonus(days) - NEGOTIATION_DISCOUNT_WEIGHT * discount_fraction,
    )


def compromise_price(current: int, target: int) -> int:
    # la tienda cede el 60% del camino hacia el precio pedido
    return current - round_half_up((current - target) * NEGOTIATION_COMPROMISE_SHARE)


def _parse_prices(current_price: Any, target_price: Any) -> Tuple[int, int]:
    current = parse_price(current_price)
    target = parse_price(target_price)
    if current <= target:
        raise RentalError("Target price must be lower than current price", "INVALID_NEGOTIATION")
    return current, target


def negotiate_price(
    shop_name: str,
    current_price: Any,
    target_price: Any,
    days: int,
    rng: random.Random | None = None,
) -> NegotiationResult:
    current, target = _parse_prices(current_price, target_price)
    rate = success_rate(current, target, days)
    draw = (rng or _rng).random()

    if draw < rate:
        return NegotiationResult(
            success=True,
            final_price=target,
            original_price=current,
            message=NEGOTIATION_SUCCESS_MSG.format(shop=shop_name, price=format_price(target), days=days),
        )

    offered = compromise_price(current, target)
    return NegotiationResult(
        success=False,
        final_price=offered,
        original_price=current,
        message=NEGOTIATION_COMPROMISE_MSG.format(
            shop=shop_name, target=format_price(target), price=format_price(offered)
        ),
    )


async def negotiate_with_vendor(
    shop_name: str,
    current_price: Any,
    target_price: Any,
    days: int,
    rng: random.Random | None = None,
) -> NegotiationResult:
    # valida antes de "llamar" a la tienda
    _parse_prices(current_price, target_price)

    log_vendor_message("negotiation", days=days, current_price=current_price, target_price=target_price)
    await simulate_latency(config.NEGOTIATION_DELAY_SECONDS)

    result = negotiate_price(shop_name, current_price, target_price, days, rng=rng)
    logger.info("Negotiation with %s: success=%s %s -> %s",
                shop_name, result.success, result.original_price, result.final_price)
    return result
