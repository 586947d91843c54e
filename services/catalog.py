# services/catalog.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from services.text import normalize

if TYPE_CHECKING:
    from services.products import Product

logger = logging.getLogger(__name__)


EMPTY_STATE_MESSAGE = (
    "No hay productos que coincidan con tu búsqueda. "
    "Prueba con otra palabra clave o agrega un nuevo producto."
)


def _matches(product: Product, key: str) -> bool:
    """
    OR entre campos y entre categorías:
    basta con que UNA categoría contenga la búsqueda.
    """
    if key in normalize(product.name):
        return True
    if key in normalize(product.description):
        return True
    return any(key in normalize(c) for c in product.categories)


def filter_products(products: Sequence[Product], raw_query: str) -> list[Product]:
    """
    Retorna los productos que contienen la búsqueda en nombre,
    descripción o alguna categoría (sin tildes ni mayúsculas).
    Búsqueda vacía -> todos, en el mismo orden.
    """
    q = (raw_query or "").strip()
    if not q:
        return list(products)

    key = normalize(q)
    rows = [p for p in products if _matches(p, key)]
    logger.debug("búsqueda %r: %d de %d", q, len(rows), len(products))
    return rows


def distinct_categories(products: Sequence[Product]) -> list[str]:
    # dedupe exacto (sensible a mayúsculas), sin normalizar
    labels = {c.strip() for p in products for c in p.categories}
    return sorted(c for c in labels if c)


def format_price(price: float | None, currency: str = "MXN") -> str:
    if price is None:
        return ""
    return f"${price:.2f} {currency}"


def results_label(n: int) -> str:
    return f"{n} producto" if n == 1 else f"{n} productos"
