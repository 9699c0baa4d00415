# app/dispatcher.py
from __future__ import annotations
import copy
import logging
from typing import Any, Awaitable, Callable, Dict, List

from app.errors import UnknownToolError
from app.rental.booking import confirm_booking
from app.rental.filters import contact_vendors
from app.rental.format import format_booking, format_negotiation, format_search_reply
from app.rental.negotiation import negotiate_with_vendor
from app.rental.pricing import days_between
from app.rental.tips import get_local_tips
from app.rental.validation import parse_days, require, validate_date_range
from app.schemas import BookingRequest
from app.settings import BIKE_TYPES, CITIES, TIP_TOPICS

logger = logging.getLogger(__name__)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# ------------------------------------------------------------
# Esquemas de las herramientas (lo que ve el cliente en "list tools")
# ------------------------------------------------------------
TOOL_SCHEMAS: List[Dict[str, Any]] = [
    {
        "name": "search_rentals",
        "description": "Search for motorbike/scooter rentals in Vietnamese cities (Da Nang, Ho Chi Minh City, Hanoi)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "city": {"type": "string", "description": "City to search in", "enum": list(CITIES)},
                "startDate": {"type": "string", "description": "Start date (YYYY-MM-DD format)", "pattern": DATE_PATTERN},
                "endDate": {"type": "string", "description": "End date (YYYY-MM-DD format)", "pattern": DATE_PATTERN},
                "budget": {"type": "string", "description": "Daily budget in Vietnamese Dong (VND)"},
                "bikeType": {"type": "string", "description": "Type of bike preferred", "enum": list(BIKE_TYPES)},
            },
            "required": ["city"],
        },
    },
    {
        "name": "negotiate_price",
        "description": "Negotiate better prices with rental shops using local connections",
        "inputSchema": {
            "type": "object",
            "properties": {
                "shopName": {"type": "string", "description": "Name of the rental shop"},
                "currentPrice": {"type": "string", "description": "Current daily price in VND"},
                "targetPrice": {"type": "string", "description": "Desired daily price in VND"},
                "days": {"type": "number", "description": "Number of rental days"},
            },
            "required": ["shopName", "currentPrice", "targetPrice", "days"],
        },
    },
    {
        "name": "book_rental",
        "description": "Complete booking process with vendor coordination",
        "inputSchema": {
            "type": "object",
            "properties": {
                "shopName": {"type": "string", "description": "Name of the rental shop"},
                "bikeModel": {"type": "string", "description": "Model of the bike to book"},
                "startDate": {"type": "string", "description": "Start date (YYYY-MM-DD)", "pattern": DATE_PATTERN},
                "endDate": {"type": "string", "description": "End date (YYYY-MM-DD)", "pattern": DATE_PATTERN},
                "customerName": {"type": "string", "description": "Customer full name"},
                "deliveryAddress": {"type": "string", "description": "Hotel or delivery address (optional)"},
                "phoneNumber": {"type": "string", "description": "Customer phone number (optional)"},
                "email": {"type": "string", "description": "Customer email (optional)"},
            },
            "required": ["shopName", "bikeModel", "startDate", "endDate", "customerName"],
        },
    },
    {
        "name": "get_local_tips",
        "description": "Get authentic local advice for riding in Vietnam",
        "inputSchema": {
            "type": "object",
            "properties": {
                "city": {"type": "string", "description": "City to get tips for", "enum": list(CITIES)},
                "topic": {"type": "string", "description": "Specific topic for advice", "enum": list(TIP_TOPICS)},
            },
            "required": ["city"],
        },
    },
]


def list_tools() -> List[Dict[str, Any]]:
    return copy.deepcopy(TOOL_SCHEMAS)


def text_content(text: str) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}


# ------------------------------------------------------------
# Handlers (uno por herramienta): checan requeridos y delegan
# ------------------------------------------------------------
async def _search_rentals(args: Dict[str, Any]) -> str:
    require(args, ["city"], "MISSING_CITY", "City is required")

    city = args["city"]
    start_date, end_date = args.get("startDate"), args.get("endDate")

    # fechas solo si vienen las dos
    has_dates = bool(start_date and end_date)
    if has_dates:
        validate_date_range(start_date, end_date)

    options = await contact_vendors(city, budget=args.get("budget"), bike_type=args.get("bikeType"))
    days = days_between(start_date, end_date) if has_dates else None
    return format_search_reply(city, options, days)


async def _negotiate_price(args: Dict[str, Any]) -> str:
    require(
        args, ["shopName", "currentPrice", "targetPrice", "days"],
        "MISSING_NEGOTIATION_PARAMS", "All negotiation parameters are required",
    )
    days = parse_days(args["days"])
    result = await negotiate_with_vendor(args["shopName"], args["currentPrice"], args["targetPrice"], days)
    return format_negotiation(result, days)


async def _book_rental(args: Dict[str, Any]) -> str:
    require(
        args, ["shopName", "bikeModel", "startDate", "endDate", "customerName"],
        "MISSING_BOOKING_PARAMS", "Missing required booking information",
    )
    request = BookingRequest(
        shop_name=args["shopName"],
        bike_model=args["bikeModel"],
        start_date=args["startDate"],
        end_date=args["endDate"],
        customer_name=args["customerName"],
        delivery_address=args.get("deliveryAddress"),
        phone_number=args.get("phoneNumber"),
        email=args.get("email"),
    )
    summary = await confirm_booking(request)
    return format_booking(
        summary,
        request.customer_name,
        delivery_address=request.delivery_address,
        phone_number=request.phone_number,
        email=request.email,
    )


async def _get_local_tips(args: Dict[str, Any]) -> str:
    require(args, ["city"], "MISSING_CITY", "City is required")
    return get_local_tips(args["city"], args.get("topic"))


HANDLERS: Dict[str, Callable[[Dict[str, Any]], Awaitable[str]]] = {
    "search_rentals": _search_rentals,
    "negotiate_price": _negotiate_price,
    "book_rental": _book_rental,
    "get_local_tips": _get_local_tips,
}


async def dispatch(name: str, arguments: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """
    Un paso por llamada: busca el handler, lo ejecuta y envuelve el texto en
    {"content": [{"type": "text", "text": ...}]}. Los RentalError suben tal cual.
    """
    handler = HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)

    logger.info("Tool call: %s", name)
    text = await handler(dict(arguments or {}))
    return text_content(text)
