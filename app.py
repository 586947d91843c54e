from __future__ import annotations

import os
import streamlit as st

from config import configure_logging, get_settings
from db.memory import load_db
from views import home, product_form


def _inject_css():
    css_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets", "styles.css")
    if os.path.exists(css_path):
        with open(css_path, "r", encoding="utf-8") as f:
            st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


def _header(app_name: str):
    st.markdown(f"# {app_name}")
    st.markdown(
        '<div class="muted">Crea productos, asígnales categorías y prueba búsquedas que '
        'encuentren resultados aunque el nombre no coincida literalmente.</div>',
        unsafe_allow_html=True,
    )
    st.write("")


def main():
    settings = get_settings()
    configure_logging(settings)

    st.set_page_config(page_title=settings.app_name, page_icon="🛒", layout="wide")
    _inject_css()

    load_db(st.session_state, seed=settings.seed_catalog)

    _header(settings.app_name)

    c_form, c_search = st.columns([1, 2], gap="large")
    with c_form:
        product_form.render()
    with c_search:
        home.render(settings)


if __name__ == "__main__":
    main()
