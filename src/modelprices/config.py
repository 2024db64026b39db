from __future__ import annotations

import os
from dataclasses import dataclass, field

CATALOG_URL = "https://openrouter.ai/api/v1/models"
MODEL_URL_PREFIX = "https://openrouter.ai/models/"


@dataclass(frozen=True)
class TableOptions:
    """Which optional fields the table offers."""

    image_cost: bool = True
    cache_costs: bool = True
    descriptions: bool = True
    compact: bool = False  # show only the always-visible columns initially


@dataclass(frozen=True)
class HttpTimeout:
    connect: float = 5.0
    request: float = 30.0


@dataclass(frozen=True)
class AppConfig:
    catalog_url: str = CATALOG_URL
    model_url_prefix: str = MODEL_URL_PREFIX
    timeout: HttpTimeout = field(default_factory=HttpTimeout)
    page_size: int = 15
    debounce_seconds: float = 0.3
    preserve_pins: bool = True
    table: TableOptions = field(default_factory=TableOptions)
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> AppConfig:
        """Build a config from ``MODELPRICES_*`` environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            catalog_url=env.get("MODELPRICES_CATALOG_URL", defaults.catalog_url),
            model_url_prefix=env.get(
                "MODELPRICES_MODEL_URL_PREFIX", defaults.model_url_prefix
            ),
            page_size=int(env.get("MODELPRICES_PAGE_SIZE", defaults.page_size)),
            debounce_seconds=float(
                env.get("MODELPRICES_DEBOUNCE_SECONDS", defaults.debounce_seconds)
            ),
            preserve_pins=_env_flag(env.get("MODELPRICES_PRESERVE_PINS"), True),
            table=TableOptions(
                compact=_env_flag(env.get("MODELPRICES_COMPACT"), False),
            ),
            host=env.get("MODELPRICES_HOST", defaults.host),
            port=int(env.get("MODELPRICES_PORT", defaults.port)),
        )


def _env_flag(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
