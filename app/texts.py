# app/texts.py
AGENT_PERSONA = {
    "name": "Nam Nguyen",
    "username": "@nam_rentalhelper",
    "personality": "friendly, helpful, local Vietnamese guy",
    "languages": {"customer": "English", "vendor": "Vietnamese"},
}

# Mensajes "para las tiendas" (vietnamita). Solo se registran en el log.
VENDOR_TEMPLATES = {
    "initial_inquiry": (
        "Chào anh/chị, bạn mình là người nước ngoài muốn thuê xe máy vài ngày ở {city}. "
        "Anh/chị có xe nào cho thuê không? Giá bao nhiêu một ngày? Có giảm giá nếu thuê "
        "3 ngày trở lên không? Gửi giúp mình vài ảnh xe với nhé. Cảm ơn nhiều!"
    ),
    "negotiation": (
        "Anh/chị có thể giảm giá một chút không? Bạn mình thuê lâu dài {days} ngày. "
        "Giá {current_price} có thể xuống {target_price} được không?"
    ),
    "booking_confirm": (
        "OK anh/chị, bạn mình đồng ý thuê xe {model} với giá {price}/ngày từ {start_date} "
        "đến {end_date}. Cần giấy tờ gì và đặt cọc bao nhiêu?"
    ),
}

# ---------- search_rentals ----------
SEARCH_INTRO = "Hey bro! 👋 Found some solid options in {city}! Let me break it down for you:"

SEARCH_OUTRO = "Which one catches your eye? I can negotiate better prices or book it straight away for you! 😊"

NO_RESULTS_MSG = (
    "Hey! I checked with my contacts in {city} but couldn't find anything matching your "
    "requirements. Try adjusting your budget or bike type, or let me know if you're "
    "flexible with the dates! 🏍️"
)

NEGOTIATION_TIPS = (
    "💡 **Nam's Local Tips:**\n"
    "- Ask for weekly rates (usually 20-30% cheaper)\n"
    "- Mention you're staying long-term for better deals  \n"
    "- Book directly through me - I can get foreigner-friendly prices\n"
    "- Avoid tourist areas for pickup (I'll handle delivery)\n"
    "- Best time to negotiate: weekdays, off-season\n"
    "- Always check the bike condition before accepting"
)

# ---------- negotiate_price ----------
NEGOTIATION_SUCCESS_MSG = (
    "Great news! 🎉 I managed to negotiate with {shop}. They agreed to {price}/day for "
    "{days} days. They like dealing with me because I bring them regular customers."
)

NEGOTIATION_COMPROMISE_MSG = (
    "I tried my best with {shop}! They can't go as low as {target}, but they offered "
    "{price}/day instead. Still a good deal considering it includes delivery."
)

# ---------- book_rental ----------
NO_DISCOUNT_MSG = "No discount (less than 3 days)"
NO_SHOP_DISCOUNT_MSG = "No discount offered by this shop"

AGENT_NOTE = "I'll coordinate pickup/delivery and handle all communication with the shop for you!"

BOOKING_NEXT_STEPS = (
    "✅ **Next Steps:**\n"
    "1. I've confirmed your booking with the shop\n"
    "2. They'll contact you 1 day before to confirm delivery/pickup\n"
    "3. Bring your passport and deposit\n"
    "4. Check the bike condition before accepting"
)

# ---------- get_local_tips ----------
NO_TIPS_MSG = (
    "I don't have specific tips for {city} yet. Stick to the main cities: Da Nang, "
    "Ho Chi Minh City, or Hanoi for the best local advice!"
)

LOCAL_TIPS = {
    "Da Nang": {
        "traffic": "Traffic is chill compared to Saigon. Watch out for the Dragon Bridge area during weekends - gets crowded with tourists. Peak hours: 7-9 AM, 5-7 PM.",
        "parking": "Park at hotels or cafes, tip the security guard 5-10k VND. Avoid leaving helmet on bike near beach areas. Most shopping centers have free motorbike parking.",
        "fuel": "Petrol stations everywhere. About 25k VND per liter. Keep tank above half - some stations close early. Look for Petrolimex or Shell stations.",
        "police": "Police rarely stop foreigners in Da Nang. If stopped, be polite, show passport and license. They usually just check and let you go. No bribes needed.",
        "routes": "Coastal road is beautiful but windy. Hai Van Pass is epic but challenging - start early morning. Ba Na Hills road can be steep and foggy.",
        "safety": "Wear helmet always! Rain comes suddenly, so bring poncho. Watch for sand on coastal roads. Avoid riding during typhoon season (Oct-Dec).",
    },
    "Ho Chi Minh City": {
        "traffic": "Crazy traffic! Follow the flow, don't stop suddenly. Peak hours are nightmare: 7-9 AM, 5-8 PM. Use Grab bike lanes when possible.",
        "parking": "Pay parking everywhere (3-5k VND). Don't park illegally - they'll clamp your wheel. District 1 has expensive parking, try side streets.",
        "fuel": "24/7 petrol stations available. Slightly more expensive than other cities. Watch for fake petrol - stick to major brands.",
        "police": "Police checkpoints common, especially at night. Always carry license and passport. Traffic fines can be negotiated but don't offer bribes first.",
        "routes": "Avoid Nguyen Hue and Dong Khoi during rush hour. Use smaller alleys but watch for one-way streets. Ring roads are faster for long distances.",
        "safety": "Super busy traffic - stay alert! Pickpockets at red lights. Don't wear jewelry or flash phone. Rain makes roads very slippery.",
    },
    "Hanoi": {
        "traffic": "Old Quarter is crazy narrow streets. Lots of one-ways and dead ends. Traffic is aggressive but slower speeds than HCMC.",
        "parking": "Street parking everywhere but watch for 'no parking' signs. Old Quarter gets expensive. Many coffee shops offer free parking.",
        "fuel": "Regular stations but some close early. Winter can affect bike performance - keep tank full. Cheaper than southern cities.",
        "police": "Stricter than south about helmets and licenses. Random checks common near tourist areas. Fines are fixed prices, don't negotiate.",
        "routes": "Ring roads bypass city center. Long Bien Bridge is scenic but windy. Avoid Old Quarter during festivals and weekends.",
        "safety": "Cold weather needs warm clothes. Rain is frequent - get good rain gear. Fog in winter reduces visibility significantly.",
    },
}
