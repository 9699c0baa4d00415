# app/rental/vendors.py
"""
"Contacto" simulado con las tiendas: no hay I/O real, solo una espera fija
y el mensaje (en vietnamita) que Nam les mandaría, al log.

simulate_latency es el único punto de espera del servidor; si algún día se
habla con tiendas de verdad, aquí van el cliente y su timeout.
"""
from __future__ import annotations
import asyncio
import logging

from app.texts import AGENT_PERSONA, VENDOR_TEMPLATES

logger = logging.getLogger(__name__)


async def simulate_latency(seconds: float) -> None:
    if seconds and seconds > 0:
        await asyncio.sleep(seconds)


def vendor_message(kind: str, **fields) -> str:
    return VENDOR_TEMPLATES[kind].format(**fields)


def log_vendor_message(kind: str, **fields) -> None:
    logger.debug("[%s -> vendor] %s", AGENT_PERSONA["name"], vendor_message(kind, **fields))
