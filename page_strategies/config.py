"""
Configuration page_strategies — lue depuis l'environnement.

Variables :
- PAGE_STRATEGIES_LOG_LEVEL          : niveau de log (défaut INFO)
- PAGE_STRATEGIES_FAIL_FAST          : une erreur de build arrête tout le build (défaut false)
- PAGE_STRATEGIES_INCREMENTAL_CACHE  : les rendus à la demande sont stockés (défaut true)
"""
import logging
import os

from pydantic import BaseModel

_TRUE = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    log_level: str = "INFO"
    fail_fast: bool = False
    incremental_cache: bool = True


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def load_settings() -> Settings:
    """Construit les Settings depuis os.environ (appelé à chaque fois, pas de cache)."""
    return Settings(
        log_level=os.getenv("PAGE_STRATEGIES_LOG_LEVEL", "INFO").upper(),
        fail_fast=_env_flag("PAGE_STRATEGIES_FAIL_FAST", False),
        incremental_cache=_env_flag("PAGE_STRATEGIES_INCREMENTAL_CACHE", True),
    )


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s — %(message)s",
    )
