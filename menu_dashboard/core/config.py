"""Application configuration helpers."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_EXTRACT_CSV_PATH = "data/extract-data.csv"
DEFAULT_STORES_CSV_PATH = "data/stores.csv"


class ConfigError(RuntimeError):
    """Raised when configuration values cannot be interpreted."""


@dataclass(frozen=True)
class Settings:
    extract_csv_path: str = DEFAULT_EXTRACT_CSV_PATH
    stores_csv_path: str = DEFAULT_STORES_CSV_PATH
    port: int = 8080
    log_level: str = "INFO"


def _parse_port(raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"DASHBOARD_PORT must be an integer, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    load_dotenv()

    extract_csv_path = os.getenv("EXTRACT_CSV_PATH") or DEFAULT_EXTRACT_CSV_PATH
    stores_csv_path = os.getenv("STORES_CSV_PATH") or DEFAULT_STORES_CSV_PATH
    port = _parse_port(os.getenv("DASHBOARD_PORT") or os.getenv("PORT") or "8080")
    log_level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()

    if not os.path.isfile(extract_csv_path):
        logger.warning("Extract CSV not found at %s; dataset loading will fail.", extract_csv_path)
    if not os.path.isfile(stores_csv_path):
        logger.warning("Stores CSV not found at %s; store URLs will not be refreshed.", stores_csv_path)

    return Settings(
        extract_csv_path=extract_csv_path,
        stores_csv_path=stores_csv_path,
        port=port,
        log_level=log_level,
    )
