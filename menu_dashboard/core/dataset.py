"""Build the dashboard dataset from the two CSV exports.

The dataset is built once by whoever hosts it (CLI job or HTTP server) and then
handed around as a plain immutable object.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

from menu_dashboard.core.config import Settings
from menu_dashboard.etl.extract import parse_extract_csv
from menu_dashboard.etl.merge import merge_store_urls
from menu_dashboard.models import DashboardData

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """Raised when the extract export cannot be read."""


def build_dashboard_data(extract_text: str, stores_text: str, now: Optional[datetime] = None) -> DashboardData:
    """Parse the extract, refresh URLs from the directory and sort stores by name."""
    stores = parse_extract_csv(extract_text)
    stores = merge_store_urls(stores, stores_text)
    stores.sort(key=lambda store: store.name.casefold())

    generated_at = (now or datetime.now(timezone.utc)).isoformat()
    return DashboardData(stores=tuple(stores), generated_at=generated_at)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


def load_dashboard_data(settings: Settings) -> DashboardData:
    """Read both exports named in ``settings`` and build the dataset.

    A missing stores.csv only skips the URL refresh; a missing or unreadable
    extract raises :class:`DatasetError`.
    """
    logger.info("Loading extract from %s", settings.extract_csv_path)
    try:
        extract_text = _read_text(settings.extract_csv_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetError(f"cannot read extract CSV {settings.extract_csv_path}: {exc}") from exc

    stores_text = ""
    if os.path.isfile(settings.stores_csv_path):
        try:
            stores_text = _read_text(settings.stores_csv_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read stores CSV %s: %s", settings.stores_csv_path, exc)
    else:
        logger.warning("Stores CSV %s not found; keeping extract URLs", settings.stores_csv_path)

    data = build_dashboard_data(extract_text, stores_text)
    logger.info("Dataset ready: stores=%d generated_at=%s", len(data.stores), data.generated_at)
    return data
