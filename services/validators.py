from __future__ import annotations
import html
import logging
import math
import re

logger = logging.getLogger(__name__)


def parse_categories(raw: str) -> list[str]:
    """
    "agua, bebida,,agua" -> ["agua", "bebida"]
    Separa por comas, recorta, descarta vacíos y duplicados exactos
    conservando el orden original.
    """
    parts = [c.strip() for c in (raw or "").split(",")]
    return list(dict.fromkeys(c for c in parts if c))


def parse_price(raw: str) -> float | None:
    """
    Precio opcional. Vacío, no numérico, infinito/NaN o negativo -> None.
    Nunca lanza: el formulario no rechaza por precio.
    """
    s = (raw or "").strip()
    if not s:
        return None
    try:
        value = float(s)
    except (ValueError, TypeError, OverflowError):
        logger.debug("precio no numérico %r, se guarda sin precio", s)
        return None
    if not math.isfinite(value) or value < 0:
        logger.debug("precio fuera de rango %r, se guarda sin precio", s)
        return None
    return value


def safe_text(s: str, max_len: int = 5000) -> str:
    s = (s or "").strip()
    s = re.sub(r"[\x00-\x08\x0B\x0C\x0E-\x1F]", "", s)
    return s[:max_len]

def safe_html(s: str, max_len: int = 5000) -> str:
    return html.escape(safe_text(s, max_len), quote=True)
