"""Vietnam rental assistant: FastMCP stdio entry point (4 tools)."""

from __future__ import annotations

import logging
import sys
from typing import Any, Literal

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from app.config import LOG_LEVEL
from app.dispatcher import dispatch
from app.errors import RentalError

mcp = FastMCP("vietnam-rental-assistant")
logger = logging.getLogger(__name__)

City = Literal["Da Nang", "Ho Chi Minh City", "Hanoi"]
BikeType = Literal["scooter", "motorbike", "automatic", "manual", "any"]
Topic = Literal["traffic", "parking", "fuel", "police", "routes", "safety"]


async def _call(name: str, arguments: dict[str, Any]) -> str:
    """Run one tool through the dispatcher; RentalError -> ToolError('<CODE>: <message>')."""
    args = {k: v for k, v in arguments.items() if v is not None}
    try:
        payload = await dispatch(name, args)
    except RentalError as exc:
        logger.warning("Tool %s failed: %s", name, exc.code)
        raise ToolError(f"{exc.code}: {exc.message}") from exc
    except Exception as exc:
        logger.exception("Unexpected error in tool %s", name)
        raise ToolError("INTERNAL_ERROR: Something went wrong on my side. Try again in a moment.") from exc
    return payload["content"][0]["text"]


@mcp.tool()
async def search_rentals(
    city: City,
    startDate: str | None = None,
    endDate: str | None = None,
    budget: str | None = None,
    bikeType: BikeType | None = None,
) -> str:
    """Search for motorbike/scooter rentals in Vietnamese cities (Da Nang, Ho Chi Minh City, Hanoi)"""
    return await _call("search_rentals", {
        "city": city, "startDate": startDate, "endDate": endDate,
        "budget": budget, "bikeType": bikeType,
    })


@mcp.tool()
async def negotiate_price(shopName: str, currentPrice: str, targetPrice: str, days: float) -> str:
    """Negotiate better prices with rental shops using local connections"""
    return await _call("negotiate_price", {
        "shopName": shopName, "currentPrice": currentPrice,
        "targetPrice": targetPrice, "days": days,
    })


@mcp.tool()
async def book_rental(
    shopName: str,
    bikeModel: str,
    startDate: str,
    endDate: str,
    customerName: str,
    deliveryAddress: str | None = None,
    phoneNumber: str | None = None,
    email: str | None = None,
) -> str:
    """Complete booking process with vendor coordination"""
    return await _call("book_rental", {
        "shopName": shopName, "bikeModel": bikeModel,
        "startDate": startDate, "endDate": endDate, "customerName": customerName,
        "deliveryAddress": deliveryAddress, "phoneNumber": phoneNumber, "email": email,
    })


@mcp.tool()
async def get_local_tips(city: City, topic: Topic | None = None) -> str:
    """Get authentic local advice for riding in Vietnam"""
    return await _call("get_local_tips", {"city": city, "topic": topic})


def main() -> None:
    # stdout es del protocolo; el log va a stderr
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)
    logger.info("Vietnam rental assistant MCP server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
