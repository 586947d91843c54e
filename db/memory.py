from __future__ import annotations
import logging
from typing import Any, Dict, List, MutableMapping

from services.products import Product

logger = logging.getLogger(__name__)

DB_KEY = "db"

SEED_PRODUCTS: List[Product] = [
    Product(
        id=1,
        name="Bonafont 1 Lt",
        description="Botella de agua natural embotellada.",
        price=12.0,
        categories=("agua", "bebida", "natural"),
    ),
    Product(
        id=2,
        name="Epura 20 Lt",
        description="Garrafon de agua",
        price=120.0,
        categories=("agua", "bebida", "natural"),
    ),
    Product(
        id=3,
        name="Sabritas Clásicas",
        description="Papas fritas clásicas tamaño individual.",
        price=18.0,
        categories=("frituras", "snack", "salado"),
    ),
]

def default_db(seed: bool = True) -> Dict[str, Any]:
    return {"products": list(SEED_PRODUCTS) if seed else []}

def load_db(state: MutableMapping[str, Any], seed: bool = True) -> Dict[str, Any]:
    """
    El catálogo vive en memoria (session_state en la app).
    Se inicializa con el set semilla la primera vez; no hay disco.
    """
    if DB_KEY not in state:
        state[DB_KEY] = default_db(seed)
        logger.debug("catálogo inicializado con %d productos", len(state[DB_KEY]["products"]))
    return state[DB_KEY]

def list_products(state: MutableMapping[str, Any]) -> List[Product]:
    return list(load_db(state)["products"])

def replace_products(state: MutableMapping[str, Any], products: List[Product]) -> None:
    # reemplazo completo, nunca mutación in-place de la lista anterior
    state[DB_KEY] = {**load_db(state), "products": list(products)}
