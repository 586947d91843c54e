from __future__ import annotations
import logging

import streamlit as st

from db.memory import list_products, replace_products
from services.products import add_product

logger = logging.getLogger(__name__)


FORM_KEYS = ["pf_name", "pf_desc", "pf_price", "pf_categories"]


def _clear_form_keys():
    """Borra solo las keys del formulario; los widgets vuelven a vacío."""
    for k in FORM_KEYS:
        if k in st.session_state:
            del st.session_state[k]


def _submit():
    ss = st.session_state
    products, product = add_product(
        list_products(ss),
        ss.get("pf_name", ""),
        ss.get("pf_desc", ""),
        ss.get("pf_price", ""),
        ss.get("pf_categories", ""),
    )
    # nombre vacío: no se agrega nada y el formulario conserva lo escrito
    if product is None:
        return

    replace_products(ss, products)
    logger.info("producto agregado id=%s nombre=%r", product.id, product.name)
    _clear_form_keys()


def render():
    st.markdown("## Nuevo producto")
    st.markdown(
        '<div class="muted">Crea productos y asígnales categorías separadas por comas.</div>',
        unsafe_allow_html=True,
    )
    st.write("")

    with st.form("product_form", clear_on_submit=False):
        st.text_input("Nombre", key="pf_name", placeholder="Ej. Bonafont 1 Lt")
        st.text_area("Descripción", key="pf_desc", height=100)
        st.text_input("Precio", key="pf_price", placeholder="Ej. 12.50")
        st.text_input("Categorías", key="pf_categories", placeholder="Ej. agua, bebida, natural")
        st.form_submit_button(
            "Agregar producto",
            key="pf_submit",
            on_click=_submit,
            width="stretch",
        )
