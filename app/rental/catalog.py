# app/rental/catalog.py
from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from app import config
from app.rental.normalize import norm_txt
from app.rental.seed import RENTAL_DATABASE
from app.schemas import RentalOption

logger = logging.getLogger(__name__)

# Columnas del frame de motos (una fila por moto)
COL_CITY     = "city"
COL_CITY_N   = "_city_n"
COL_SHOP     = "shop"
COL_POSITION = "position"   # índice de la moto dentro de su tienda
COL_MODEL    = "model"
COL_PRICE    = "price_per_day"
COL_AVAIL    = "available"
COL_TRANS    = "transmission"
COL_FUEL     = "fuel_type"


# ------------------------------------------------------------------------------------
# Carga
# ------------------------------------------------------------------------------------
def _read_records(path: str) -> List[Dict[str, Any]]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"No se encontró el catálogo en: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"El catálogo debe ser una lista de tiendas: {path}")
    return data


def load_catalog(path: str | None = None) -> "Catalog":
    """
    Construye el catálogo desde el seed en memoria, o desde un JSON si se pasa
    path (o RENTAL_CATALOG_PATH). Valida cada tienda con pydantic.
    """
    path = path if path is not None else config.RENTAL_CATALOG_PATH
    records = _read_records(path) if path else RENTAL_DATABASE
    shops = [RentalOption.model_validate(r) for r in records]
    logger.info("Catalog loaded: %d shops, %d bikes (%s)",
                len(shops), sum(len(s.bikes) for s in shops), path or "seed")
    return Catalog(shops)


def build_bikes_frame(shops: Sequence[RentalOption]) -> pd.DataFrame:
    rows = []
    for shop in shops:
        for pos, bike in enumerate(shop.bikes):
            rows.append({
                COL_CITY:     shop.city,
                COL_CITY_N:   norm_txt(shop.city),
                COL_SHOP:     shop.shop,
                COL_POSITION: pos,
                COL_MODEL:    bike.model,
                COL_PRICE:    int(bike.price_per_day),
                COL_AVAIL:    bool(bike.available),
                COL_TRANS:    bike.transmission,
                COL_FUEL:     bike.fuel_type,
            })
    columns = [COL_CITY, COL_CITY_N, COL_SHOP, COL_POSITION, COL_MODEL,
               COL_PRICE, COL_AVAIL, COL_TRANS, COL_FUEL]
    return pd.DataFrame(rows, columns=columns)


# ------------------------------------------------------------------------------------
# API de alto nivel
# ------------------------------------------------------------------------------------
class Catalog:
    """
    Carga el catálogo una vez y reutiliza estructuras en memoria.
    Solo lectura: nadie debe modificar las tiendas ni el frame después de cargar.
    """
    def __init__(self, shops: Sequence[RentalOption]):
        self.shops: tuple[RentalOption, ...] = tuple(shops)
        self._by_name: Dict[str, RentalOption] = {s.shop: s for s in self.shops}
        self._bikes = build_bikes_frame(self.shops)

    def __len__(self) -> int:
        return len(self.shops)

    def bikes_frame(self) -> pd.DataFrame:
        # copia por request: los filtros trabajan sobre su propio frame
        return self._bikes.copy()

    def shops_in_city(self, city: str) -> List[RentalOption]:
        """Tiendas de la ciudad (sin distinguir mayúsculas/acentos), en orden del catálogo."""
        key = norm_txt(city)
        return [s for s in self.shops if norm_txt(s.city) == key]

    def find_shop(self, name: str) -> Optional[RentalOption]:
        # coincidencia exacta por nombre
        return self._by_name.get(name)

    def shop_names(self) -> List[str]:
        return [s.shop for s in self.shops]


_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Catálogo global del proceso (se construye en el primer uso)."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def reset_catalog() -> None:
    global _catalog
    _catalog = None
