"""Application settings read from the environment.

Persistence, brokers and the event store are configured in ``domain.toml``
and selected by ``PROTEAN_ENV``; this module only covers the HTTP surface.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    api_prefix: str
    cors_origins: list[str]
    host: str
    port: int


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    prefix = os.getenv("STOCKROOM_API_PREFIX", "/api").rstrip("/")
    return Settings(
        api_prefix=prefix,
        cors_origins=_split_origins(os.getenv("STOCKROOM_CORS_ORIGINS", "*")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
