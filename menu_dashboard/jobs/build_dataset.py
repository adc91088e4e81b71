"""CLI job that builds the dashboard dataset and optionally writes it as JSON."""

import argparse
import json
import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from menu_dashboard.core.config import get_settings
from menu_dashboard.core.dataset import load_dashboard_data
from menu_dashboard.etl.stats import get_overview_stats
from menu_dashboard.models import DashboardData

logger = logging.getLogger(__name__)


def to_payload(data: DashboardData) -> Dict[str, Any]:
    payload = data.to_dict()
    payload["overview"] = get_overview_stats(data.stores).to_dict()
    return payload


def run_build_job(*, extract_path: Optional[str], stores_path: Optional[str], output: Optional[str]) -> DashboardData:
    settings = get_settings()
    if extract_path:
        settings = replace(settings, extract_csv_path=extract_path)
    if stores_path:
        settings = replace(settings, stores_csv_path=stores_path)

    data = load_dashboard_data(settings)
    stats = get_overview_stats(data.stores)
    logger.info(
        "Built dataset: stores=%d items=%d specials=%d avg_rating=%s",
        stats.total_stores,
        stats.total_items,
        stats.total_specials,
        stats.avg_rating,
    )

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            json.dump(to_payload(data), fh, ensure_ascii=False, indent=2)
        logger.info("Wrote dataset to %s", output)

    return data


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Build the menu dashboard dataset")
    parser.add_argument(
        "--extract",
        dest="extract_path",
        default=settings.extract_csv_path,
        help="Item-level extract CSV",
    )
    parser.add_argument(
        "--stores",
        dest="stores_path",
        default=settings.stores_csv_path,
        help="Store directory CSV with canonical Uber Eats URLs",
    )
    parser.add_argument("--output", dest="output", help="Write the dataset and overview stats to this JSON file")
    return parser


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    parser = build_parser()
    args = parser.parse_args()

    run_build_job(extract_path=args.extract_path, stores_path=args.stores_path, output=args.output)


if __name__ == "__main__":
    main()
