# app/rental/filters.py
from __future__ import annotations
import logging
from typing import Any, List, Optional

import pandas as pd

from app import config
from app.errors import RentalError
from app.rental.catalog import (
    COL_CITY_N, COL_POSITION, COL_PRICE, COL_SHOP, COL_TRANS,
    Catalog, get_catalog,
)
from app.rental.normalize import norm_txt
from app.rental.validation import parse_price
from app.rental.vendors import log_vendor_message, simulate_latency
from app.schemas import RentalOption
from app.settings import BIKE_TYPE_TRANSMISSION, CITIES
from app.texts import AGENT_PERSONA

logger = logging.getLogger(__name__)


def validate_city(city: str) -> None:
    if not city or city not in CITIES:
        raise RentalError(f"Invalid city. Must be one of: {', '.join(CITIES)}", "INVALID_CITY")


def transmission_for(bike_type: Optional[str]) -> Optional[str]:
    """scooter/automatic -> automatic, motorbike/manual -> manual; 'any' o desconocido -> None."""
    if not bike_type or bike_type == "any":
        return None
    return BIKE_TYPE_TRANSMISSION.get(bike_type)


# ------------------------------------------------------------
# Filtro común (devuelve el DataFrame filtrado, sin tocar el catálogo)
# ------------------------------------------------------------
def _apply_filters(
    df: pd.DataFrame,
    city: str,
    budget: Optional[int],
    transmission: Optional[str],
) -> pd.DataFrame:
    sub = df.copy()

    sub = sub[sub[COL_CITY_N] == norm_txt(city)]

    if budget is not None:
        sub = sub[sub[COL_PRICE] <= int(budget)]

    if transmission:
        sub = sub[sub[COL_TRANS] == transmission]

    return sub


def search_rentals(
    city: str,
    budget: Any = None,
    bike_type: Optional[str] = None,
    catalog: Catalog | None = None,
) -> List[RentalOption]:
    """
    Tiendas de la ciudad con al menos una moto que pase los filtros.
    Cada tienda regresa como copia con su propia tupla de motos; el catálogo no cambia.
    """
    validate_city(city)
    catalog = catalog or get_catalog()

    budget_num = parse_price(budget) if budget else None
    sub = _apply_filters(catalog.bikes_frame(), city, budget_num, transmission_for(bike_type))

    views: List[RentalOption] = []
    for shop in catalog.shops_in_city(city):
        positions = sorted(sub.loc[sub[COL_SHOP] == shop.shop, COL_POSITION].tolist())
        if not positions:
            continue
        bikes = tuple(shop.bikes[int(i)] for i in positions)
        views.append(shop.model_copy(update={"bikes": bikes}))
    return views


async def contact_vendors(
    city: str,
    budget: Any = None,
    bike_type: Optional[str] = None,
    catalog: Catalog | None = None,
) -> List[RentalOption]:
    validate_city(city)
    logger.info("[%s]: Contacting rental shops in %s...", AGENT_PERSONA["name"], city)
    log_vendor_message("initial_inquiry", city=city)

    await simulate_latency(config.VENDOR_DELAY_SECONDS)

    options = search_rentals(city, budget=budget, bike_type=bike_type, catalog=catalog)
    logger.info("Found %d shop(s) in %s (budget=%s, bikeType=%s)", len(options), city, budget, bike_type)
    return options
