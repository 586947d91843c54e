from __future__ import annotations
import logging

import pandas as pd
import streamlit as st

from config import Settings
from db.memory import list_products
from services.catalog import (
    EMPTY_STATE_MESSAGE,
    distinct_categories,
    filter_products,
    format_price,
    results_label,
)
from services.validators import safe_html

logger = logging.getLogger(__name__)


CHIPS_PER_ROW = 6


def _use_category(category: str) -> None:
    # callback: corre antes del rerun, por eso puede tocar la key del text_input
    st.session_state["search"] = category


def _as_frame(rows, currency: str) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Nombre": p.name,
            "Descripción": p.description,
            "Precio": format_price(p.price, currency),
            "Categorías": ", ".join(p.categories),
        }
        for p in rows
    ])


def _category_chips(categories: list[str]) -> None:
    if not categories:
        return
    st.markdown('<div class="muted">Categorías populares:</div>', unsafe_allow_html=True)
    for i in range(0, len(categories), CHIPS_PER_ROW):
        row = categories[i:i + CHIPS_PER_ROW]
        cols = st.columns(CHIPS_PER_ROW, gap="small")
        for col, category in zip(cols, row):
            with col:
                st.button(
                    category,
                    key=f"chip_{category}",
                    on_click=_use_category,
                    args=(category,),
                    width="stretch",
                )


def _card(p, currency: str) -> None:
    desc_html = (
        f'<p class="product-description">{safe_html(p.description)}</p>'
        if p.description else ""
    )
    price = format_price(p.price, currency)
    price_html = f'<span class="price">{safe_html(price)}</span>' if price else ""
    chips_html = "".join(f'<span class="chip">{safe_html(c)}</span>' for c in p.categories)

    st.markdown(
        f"""
        <div class="product-card">
          <div class="product-main">
            <div class="title">{safe_html(p.name)}</div>
            {desc_html}
          </div>
          <div class="product-meta">
            {price_html}
            <div class="chips">{chips_html}</div>
          </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render(settings: Settings):
    st.markdown("## Búsqueda semántica")
    st.markdown(
        '<div class="muted">Busca por nombre, descripción o categoría. Por ejemplo, escribe '
        '<b>agua</b> para ver todos los productos con esa categoría, aunque el nombre '
        'no sea literalmente "agua".</div>',
        unsafe_allow_html=True,
    )
    st.write("")

    st.session_state.setdefault("search", "")
    st.text_input(
        "Término de búsqueda",
        key="search",
        placeholder="Ej. agua, snack, frituras, dulce...",
    )

    products = list_products(st.session_state)
    _category_chips(distinct_categories(products))

    rows = filter_products(products, st.session_state.get("search", ""))

    st.markdown("### Resultados")
    st.caption(results_label(len(rows)))

    if not rows:
        st.info(EMPTY_STATE_MESSAGE)
        return

    if st.toggle("Ver como tabla", key="as_table"):
        st.dataframe(_as_frame(rows, settings.currency), hide_index=True, width="stretch")
        return

    for p in rows:
        _card(p, settings.currency)
