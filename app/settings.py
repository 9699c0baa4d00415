import os

# Ciudades donde Nam tiene contactos
CITIES = ("Da Nang", "Ho Chi Minh City", "Hanoi")

BIKE_TYPES = ("scooter", "motorbike", "automatic", "manual", "any")
TIP_TOPICS = ("traffic", "parking", "fuel", "police", "routes", "safety")

# bikeType -> transmisión (lo que no esté aquí no filtra)
BIKE_TYPE_TRANSMISSION = {
    "scooter": "automatic",
    "automatic": "automatic",
    "motorbike": "manual",
    "manual": "manual",
}

# Renta
MAX_RENTAL_DAYS = 30
DISCOUNT_MIN_DAYS = 3
DEFAULT_DISCOUNT_PERCENT = float(os.getenv("DEFAULT_DISCOUNT_PERCENT", "10"))

# Negociación
NEGOTIATION_BASE_RATE = 0.7
NEGOTIATION_MAX_RATE = 0.9
NEGOTIATION_DISCOUNT_WEIGHT = 2.0
NEGOTIATION_WEEKLY_BONUS = 0.2   # 7+ días
NEGOTIATION_MULTIDAY_BONUS = 0.1  # 3+ días
NEGOTIATION_COMPROMISE_SHARE = 0.6

BOOKING_ID_PREFIX = "VR"
CURRENCY_SYMBOL = "₫"
