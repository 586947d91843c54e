# services/products.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence

from services.validators import parse_categories, parse_price

logger = logging.getLogger(__name__)


def new_id() -> int:
    # milisegundos; colisiones posibles y aceptadas
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Product:
    """Producto del catálogo. Inmutable una vez creado."""
    id: int
    name: str
    description: str = ""
    price: Optional[float] = None
    categories: tuple[str, ...] = field(default_factory=tuple)


def create_product(
    raw_name: str,
    raw_description: str,
    raw_price: str,
    raw_categories: str,
    *,
    product_id: int | None = None,
) -> Product | None:
    """
    Frontera de validación del formulario.
    - nombre vacío (tras strip) -> None, no se crea nada
    - precio inválido -> se guarda sin precio
    - categorías: "a, b, a" -> ("a", "b")
    """
    name = (raw_name or "").strip()
    if not name:
        logger.debug("producto rechazado: nombre vacío")
        return None

    return Product(
        id=product_id if product_id is not None else new_id(),
        name=name,
        description=(raw_description or "").strip(),
        price=parse_price(raw_price),
        categories=tuple(parse_categories(raw_categories)),
    )


def add_product(
    products: Sequence[Product],
    raw_name: str,
    raw_description: str,
    raw_price: str,
    raw_categories: str,
    *,
    product_id: int | None = None,
) -> tuple[Sequence[Product], Product | None]:
    """
    Retorna (colección, producto).
    Si se crea, la colección es una lista NUEVA con el producto al inicio
    (más reciente primero). Si se rechaza, es la misma colección recibida.
    """
    product = create_product(
        raw_name, raw_description, raw_price, raw_categories, product_id=product_id
    )
    if product is None:
        return products, None
    return [product, *products], product
