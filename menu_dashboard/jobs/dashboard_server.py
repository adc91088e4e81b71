"""HTTP entrypoint serving the dashboard dataset as JSON."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, current_app, jsonify, request

from menu_dashboard.core.config import get_settings
from menu_dashboard.core.dataset import load_dashboard_data
from menu_dashboard.etl.reports import (
    category_breakdown,
    compare_stores,
    find_store,
    rating_band,
    search_stores,
    specials_coverage,
)
from menu_dashboard.etl.stats import get_overview_stats
from menu_dashboard.models import DashboardData

logger = logging.getLogger(__name__)

DATA_KEY = "DASHBOARD_DATA"


def create_app(data: DashboardData) -> Flask:
    """Build the Flask app around an already-loaded dataset."""
    app = Flask(__name__)
    app.config[DATA_KEY] = data

    # ---------- Routes ----------

    @app.get("/")
    def root() -> Any:
        return "ok", 200

    @app.get("/healthz")
    def healthcheck() -> Any:
        dataset = _dataset()
        return (
            jsonify({"status": "ok", "stores": len(dataset.stores), "generated_at": dataset.generated_at}),
            200,
        )

    @app.get("/api/stores")
    def list_stores() -> Any:
        """
        Store table.
        Optional query params: q (search text), sort (name|region|rating|review_count|items|specials),
        order (asc|desc)
        """
        query = request.args.get("q", "")
        sort_key = request.args.get("sort", "name")
        order = request.args.get("order", "asc").lower()
        if order not in ("asc", "desc"):
            return jsonify({"error": "order must be asc or desc"}), 400

        try:
            stores = search_stores(_dataset().stores, query=query, sort_key=sort_key, descending=order == "desc")
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        return jsonify({"data": [store.to_dict() for store in stores]}), 200

    @app.get("/api/stores/<slug>")
    def store_detail(slug: str) -> Any:
        store = find_store(_dataset().stores, slug)
        if store is None:
            return jsonify({"error": f"store not found: {slug}"}), 404

        payload = {
            "store": store.to_dict(),
            "categories": [entry.to_dict() for entry in category_breakdown(store)],
            "rating_band": rating_band(store.rating),
        }
        return jsonify({"data": payload}), 200

    @app.get("/api/overview")
    def overview() -> Any:
        dataset = _dataset()
        payload = get_overview_stats(dataset.stores).to_dict()
        payload["generated_at"] = dataset.generated_at
        return jsonify({"data": payload}), 200

    @app.get("/api/specials")
    def specials() -> Any:
        stores = _dataset().stores
        payload = specials_coverage(stores).to_dict()
        payload["total_stores"] = len(stores)
        return jsonify({"data": payload}), 200

    @app.get("/api/compare")
    def compare() -> Any:
        """Compare 2-4 stores: /api/compare?slug=a&slug=b"""
        slugs = request.args.getlist("slug")
        try:
            comparison = compare_stores(_dataset().stores, slugs)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify({"data": comparison.to_dict()}), 200

    return app


# ---------- Internals ----------


def _dataset() -> DashboardData:
    return current_app.config[DATA_KEY]


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

    # Load before binding so every request sees the same dataset.
    data = load_dashboard_data(settings)
    app = create_app(data)

    logger.info("[BOOT] Binding on 0.0.0.0:%d", settings.port)
    app.run(host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
