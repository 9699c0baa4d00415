# app/rental/normalize.py
from __future__ import annotations
import re
from typing import List, Tuple

from rapidfuzz import process, fuzz
from unidecode import unidecode


def norm_txt(s: str | None) -> str:
    """
    Normaliza texto: quita acentos, baja a minúsculas, colapsa espacios.
    "Thanh Xe Tốt" -> "thanh xe tot"
    """
    s = unidecode(s or "")
    s = s.strip().lower()
    s = re.sub(r"\s+", " ", s)
    return s


def fuzzy_best(q: str | None, choices: List[str], score_cutoff: int = 70) -> Tuple[str | None, int]:
    """Mejor candidato (original, score) comparando en forma normalizada."""
    if not q or not choices:
        return None, 0
    normalized = [norm_txt(c) for c in choices]
    m = process.extractOne(norm_txt(q), normalized, scorer=fuzz.WRatio, score_cutoff=score_cutoff)
    if not m:
        return None, 0
    # m = (match, score, index)
    return choices[m[2]], int(m[1])


def did_you_mean(q: str | None, choices: List[str]) -> str:
    """Sufijo ' Did you mean X?' para errores de búsqueda exacta; '' si no hay candidato."""
    best, _ = fuzzy_best(q, choices)
    if not best or best == q:
        return ""
    return f" Did you mean {best}?"
