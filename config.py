"""Settings de la app: variables de entorno CATALOGO_* o archivo .env."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CATALOGO_", env_file=".env", case_sensitive=False)

    app_name: str = "Catálogo semántico de tienda"
    currency: str = "MXN"

    # False -> el catálogo arranca vacío
    seed_catalog: bool = True

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    # basicConfig no hace nada si el root ya tiene handlers (reruns de streamlit)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
