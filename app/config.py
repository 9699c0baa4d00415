import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Retardos simulados ("contactar" a las tiendas), en segundos
VENDOR_DELAY_SECONDS = float(os.getenv("VENDOR_DELAY_SECONDS", "2.0"))
NEGOTIATION_DELAY_SECONDS = float(os.getenv("NEGOTIATION_DELAY_SECONDS", "3.0"))
BOOKING_DELAY_SECONDS = float(os.getenv("BOOKING_DELAY_SECONDS", "2.0"))

# Catálogo alterno en JSON (opcional); si no, se usa el seed en memoria
RENTAL_CATALOG_PATH = os.getenv("RENTAL_CATALOG_PATH", "")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
