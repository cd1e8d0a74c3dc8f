"""Environment-driven settings for the F1 dashboard."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from f1feeds._http import DEFAULT_TIMEOUT, JOLPICA_BASE_URL, OPENF1_BASE_URL


class DashboardSettings(BaseSettings):
    """Upstream endpoints and cache hints, overridable via ``F1DASH_*`` variables."""

    model_config = SettingsConfigDict(
        env_prefix="F1DASH_",
        env_file=".env",
        extra="ignore",
    )

    jolpica_base_url: str = JOLPICA_BASE_URL
    openf1_base_url: str = OPENF1_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT
    cache_ttl_seconds: int = 3600
    default_source: str = "Jolpica"


@lru_cache(maxsize=1)
def get_settings() -> DashboardSettings:
    return DashboardSettings()
