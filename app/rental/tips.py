# app/rental/tips.py
from __future__ import annotations
from typing import Dict, Optional

from app.texts import LOCAL_TIPS, NO_TIPS_MSG


def tips_for_city(city: str) -> Optional[Dict[str, str]]:
    return LOCAL_TIPS.get(city)


def get_local_tips(city: str, topic: Optional[str] = None) -> str:
    """
    Consejos locales para manejar en la ciudad.
    - Ciudad sin consejos -> mensaje amable (no es error).
    - Tema conocido -> solo ese tema; si no, todos los temas de la ciudad.
    """
    city_tips = tips_for_city(city)
    if not city_tips:
        return NO_TIPS_MSG.format(city=city)

    if topic and topic in city_tips:
        return f"💡 **{topic.capitalize()} tips for {city}:**\n\n{city_tips[topic]}"

    out = f"💡 **Local tips for {city}:**\n\n"
    for key, value in city_tips.items():
        out += f"**{key.capitalize()}:** {value}\n\n"
    return out
