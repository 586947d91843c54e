import pytest

from services.products import Product


@pytest.fixture
def products():
    """Catálogo pequeño, más reciente primero."""
    return [
        Product(
            id=10,
            name="Bonafont 1 Lt",
            description="Botella de agua natural embotellada.",
            price=12.0,
            categories=("agua", "bebida"),
        ),
        Product(
            id=11,
            name="Sabritas Clásicas",
            description="Papas fritas clásicas tamaño individual.",
            price=18.0,
            categories=("frituras",),
        ),
        Product(
            id=12,
            name="Jamaica",
            description="",
            price=None,
            categories=("Agua fresca", "Bebida"),
        ),
    ]
