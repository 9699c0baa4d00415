# app/rental/format.py
"""
Formato de respuestas para el cliente (texto plano con emojis y **negritas**).
Solo presentación: los precios/días ya vienen calculados por pricing.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from app.rental.pricing import format_price, total_price
from app.schemas import BikeModel, BookingSummary, NegotiationResult, RentalOption
from app.settings import DEFAULT_DISCOUNT_PERCENT
from app.texts import (
    BOOKING_NEXT_STEPS,
    NEGOTIATION_TIPS,
    NO_RESULTS_MSG,
    SEARCH_INTRO,
    SEARCH_OUTRO,
)


def _fmt_rating(rating: Optional[float]) -> str:
    return f"{rating:g}" if rating is not None else "n/a"


def _format_bike(bike: BikeModel, days: Optional[int] = None) -> List[str]:
    status = "✅" if bike.available else "❌"
    total_str = ""
    if days and bike.available:
        total = total_price(bike.price_per_day, days, DEFAULT_DISCOUNT_PERCENT)
        total_str = f" ({days} days: {format_price(total)})"
    return [
        f"   {status} {bike.model} - {format_price(bike.price_per_day)}/day{total_str}",
        f"      {bike.engine} • {bike.transmission} • {bike.fuel_type}",
    ]


def _format_shop(option: RentalOption, days: Optional[int] = None) -> str:
    lines = [f"🏪 **{option.shop}** (Rating: {_fmt_rating(option.rating)}/5)"]
    if option.address:
        lines.append(f"📍 {option.address}")
    lines.append(f"📞 Contact: {option.contact}")
    if option.working_hours:
        lines.append(f"🕒 Hours: {option.working_hours}")
    lines.append(f"🚚 Delivery: {option.delivery}")
    if option.discount:
        lines.append(f"💰 Discount: {option.discount}")
    lines.append(f"📋 Requirements: {', '.join(option.requirements)}")
    lines.append("")
    lines.append("🏍️ Available bikes:")
    for bike in option.bikes:
        lines.extend(_format_bike(bike, days))
    return "\n".join(lines)


def format_options(options: Sequence[RentalOption], days: Optional[int] = None) -> str:
    """Un bloque por tienda, separados por línea en blanco."""
    return "\n\n".join(_format_shop(o, days) for o in options)


def format_search_reply(city: str, options: Sequence[RentalOption], days: Optional[int] = None) -> str:
    if not options:
        return NO_RESULTS_MSG.format(city=city)
    return "\n\n".join([
        SEARCH_INTRO.format(city=city),
        format_options(options, days),
        NEGOTIATION_TIPS,
        SEARCH_OUTRO,
    ])


def format_negotiation(result: NegotiationResult, days: int) -> str:
    closing = "🎉 Deal secured!" if result.success else "💪 Still a good compromise!"
    return (
        "🎯 **Negotiation Update**\n\n"
        f"{result.message}\n\n"
        "💰 **Price Summary:**\n"
        f"- Original: {format_price(result.original_price)}/day\n"
        f"- Final: {format_price(result.final_price)}/day\n"
        f"- Total for {days} days: {format_price(result.final_price * days)}\n\n"
        f"{closing} Want me to book this for you?"
    )


def format_booking(
    summary: BookingSummary,
    customer_name: str,
    delivery_address: Optional[str] = None,
    phone_number: Optional[str] = None,
    email: Optional[str] = None,
) -> str:
    header = [
        "🎉 **Booking Confirmed!**",
        "",
        f"**Booking ID:** {summary.booking_id}",
        f"**Customer:** {customer_name}",
    ]
    if phone_number:
        header.append(f"**Phone:** {phone_number}")
    if email:
        header.append(f"**Email:** {email}")
    header += [
        f"**Shop:** {summary.shop}",
        f"**Bike:** {summary.bike.model} ({summary.bike.engine})",
        f"**Duration:** {summary.duration} ({summary.start_date} to {summary.end_date})",
        f"**Price:** {summary.daily_price} × {summary.duration} = {summary.total_price}",
    ]
    if summary.discount:
        header.append(f"**Discount:** {summary.discount}")

    if delivery_address:
        pickup = f"Delivery to: {delivery_address}"
    else:
        pickup = f"Pickup at: {summary.address}"

    return "\n".join(header) + "\n\n" + "\n\n".join([
        f"📍 **Pickup/Delivery:**\n{pickup}",
        f"📋 **Requirements:** {', '.join(summary.requirements)}",
        f"📞 **Shop Contact:** {summary.contact}",
        BOOKING_NEXT_STEPS,
        summary.agent_note,
    ])
