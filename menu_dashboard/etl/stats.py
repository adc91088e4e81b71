"""Overview statistics for the dashboard landing page."""

import math
from typing import Dict, List, Sequence

from menu_dashboard.models import CategoryCount, OverviewStats, Store

RANKING_SIZE = 5


def round_half_up(value: float, digits: int = 1) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def count_categories(stores: Sequence[Store]) -> List[CategoryCount]:
    """Item counts per category across ``stores``, largest first; ties keep first-seen order."""
    counts: Dict[str, int] = {}
    for store in stores:
        for item in store.items:
            counts[item.category] = counts.get(item.category, 0) + 1
    ranked = sorted(counts.items(), key=lambda entry: entry[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ranked]


def get_overview_stats(stores: Sequence[Store]) -> OverviewStats:
    total_stores = len(stores)
    total_items = sum(len(store.items) for store in stores)
    total_specials = sum(len(store.specials) for store in stores)
    avg_rating = round_half_up(sum(store.rating for store in stores) / total_stores) if total_stores else 0.0

    region_counts: Dict[str, int] = {}
    for store in stores:
        region_counts[store.region.value] = region_counts.get(store.region.value, 0) + 1

    # sorted() is stable and reverse=True keeps tied stores in input order.
    by_rating = sorted(stores, key=lambda store: store.rating, reverse=True)
    top_stores = by_rating[:RANKING_SIZE]
    # Worst first: the tail of the descending order, reversed.
    bottom_stores = list(reversed(by_rating[-RANKING_SIZE:]))

    return OverviewStats(
        total_stores=total_stores,
        total_items=total_items,
        total_specials=total_specials,
        avg_rating=avg_rating,
        region_counts=region_counts,
        category_distribution=count_categories(stores),
        top_stores=top_stores,
        bottom_stores=bottom_stores,
    )
