# app/rental/seed.py
# Tabla fija de tiendas/motos. Mismo formato que acepta RENTAL_CATALOG_PATH (JSON).
RENTAL_DATABASE = [
    {
        "city": "Da Nang",
        "shop": "Thanh Xe Tốt",
        "contact": "+84901234567",
        "bikes": [
            {"model": "Honda Vision", "price_per_day": 150000, "available": True,
             "engine": "125cc", "transmission": "automatic", "fuel_type": "petrol"},
            {"model": "Yamaha Nouvo", "price_per_day": 180000, "available": True,
             "engine": "135cc", "transmission": "automatic", "fuel_type": "petrol"},
            {"model": "Honda SH", "price_per_day": 250000, "available": False,
             "engine": "150cc", "transmission": "automatic", "fuel_type": "petrol"},
        ],
        "discount": "10% off for 3+ days",
        "delivery": "Yes, within city center",
        "requirements": ["Passport copy", "50,000₫ deposit"],
        "rating": 4.5,
        "address": "123 Le Duan St, Hai Chau, Da Nang",
        "working_hours": "8:00 AM - 8:00 PM",
    },
    {
        "city": "Ho Chi Minh City",
        "shop": "Saigon Motorbike Rental",
        "contact": "+84907654321",
        "bikes": [
            {"model": "Honda Wave", "price_per_day": 120000, "available": True,
             "engine": "110cc", "transmission": "manual", "fuel_type": "petrol"},
            {"model": "Yamaha Exciter", "price_per_day": 200000, "available": True,
             "engine": "155cc", "transmission": "manual", "fuel_type": "petrol"},
            {"model": "Honda CBR", "price_per_day": 300000, "available": True,
             "engine": "250cc", "transmission": "manual", "fuel_type": "petrol"},
        ],
        "discount": "15% off for 5+ days",
        "delivery": "Yes, to hotel/airport",
        "requirements": ["International license", "Passport", "100,000₫ deposit"],
        "rating": 4.8,
        "address": "456 Nguyen Hue St, District 1, Ho Chi Minh City",
        "working_hours": "7:00 AM - 9:00 PM",
    },
    {
        "city": "Hanoi",
        "shop": "Hanoi Easy Riders",
        "contact": "+84912345678",
        "bikes": [
            {"model": "Honda Future", "price_per_day": 140000, "available": True,
             "engine": "125cc", "transmission": "manual", "fuel_type": "petrol"},
            {"model": "Suzuki Raider", "price_per_day": 160000, "available": True,
             "engine": "150cc", "transmission": "manual", "fuel_type": "petrol"},
            {"model": "Kawasaki Ninja", "price_per_day": 350000, "available": False,
             "engine": "300cc", "transmission": "manual", "fuel_type": "petrol"},
        ],
        "discount": "20% off for weekly rental",
        "delivery": "District 1 and Ba Dinh only",
        "requirements": ["Passport copy", "Visa", "200,000₫ deposit"],
        "rating": 4.3,
        "address": "789 Hoan Kiem St, Old Quarter, Hanoi",
        "working_hours": "8:00 AM - 7:00 PM",
    },
]
