"""
Centralised settings loader (pydantic-settings).

Every field can be overridden by the upper-cased env-var of the same
name, or from a local `.env` file.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime ─────────────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"

    # ─── meal diary ──────────────────────────────────────────────────
    default_meal_type: str = "Desayuno"
    week_good_threshold: int = 15       # meals/week above this → "Bien"
    week_regular_threshold: int = 7     # above this → "Regular"

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
