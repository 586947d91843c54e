"""
Tests de la frontera de validación del formulario.
"""
import dataclasses

import pytest

from services.products import Product, add_product, create_product
from services.validators import parse_categories, parse_price


class TestParseCategories:

    def test_split_trim_dedup(self):
        assert parse_categories("agua, bebida,,agua , natural") == ["agua", "bebida", "natural"]

    def test_case_sensitive(self):
        assert parse_categories("Agua,agua") == ["Agua", "agua"]

    def test_empty(self):
        assert parse_categories("") == []
        assert parse_categories(" , ,") == []
        assert parse_categories(None) == []


class TestParsePrice:

    def test_valid(self):
        assert parse_price("12.5") == 12.5
        assert parse_price(" 7 ") == 7.0
        assert parse_price("0") == 0.0

    @pytest.mark.parametrize("raw", ["", "   ", "not-a-number", "12,5", "inf", "nan", "1e400", "-3", None])
    def test_fallback_to_absent(self, raw):
        assert parse_price(raw) is None


class TestCreateProduct:

    def test_full_product(self):
        p = create_product("  Epura 20 Lt ", " Garrafon de agua ", "120", "agua, bebida, agua", product_id=7)
        assert p == Product(
            id=7,
            name="Epura 20 Lt",
            description="Garrafon de agua",
            price=120.0,
            categories=("agua", "bebida"),
        )

    def test_invalid_price_is_not_a_rejection(self):
        p = create_product("X", "", "not-a-number", "")
        assert p is not None
        assert p.price is None
        assert p.categories == ()

    def test_blank_name_rejected(self):
        assert create_product("   ", "d", "5", "cat") is None
        assert create_product("", "", "", "") is None

    def test_assigns_integer_id(self):
        p = create_product("X", "", "", "")
        assert isinstance(p.id, int)

    def test_immutable(self):
        p = create_product("X", "", "", "")
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "Y"


class TestAddProduct:

    def test_prepends_new_product(self, products):
        result, p = add_product(products, "New", "", "", "", product_id=99)
        assert result[0] is p
        assert p.name == "New"
        assert result[1:] == products

    def test_returns_new_collection(self, products):
        before = list(products)
        result, _ = add_product(products, "New", "", "", "")
        assert result is not products
        assert products == before

    def test_rejection_leaves_collection_unchanged(self, products):
        result, p = add_product(products, "   ", "d", "5", "cat")
        assert p is None
        assert result is products
        assert len(result) == 3
