"""View-shaped summaries: store lookup, specials coverage, store comparison, store table."""

from typing import Callable, Dict, List, Optional, Sequence

from menu_dashboard.etl.stats import count_categories
from menu_dashboard.models import (
    CategoryComparison,
    CategoryCount,
    SpecialComparison,
    SpecialCoverage,
    SpecialsCoverage,
    Store,
    StoreComparison,
    StoreMetrics,
)

MIN_COMPARE = 2
MAX_COMPARE = 4

SORT_KEYS: Dict[str, Callable[[Store], object]] = {
    "name": lambda store: store.name.casefold(),
    "region": lambda store: store.region.value.casefold(),
    "rating": lambda store: store.rating,
    "review_count": lambda store: store.review_count,
    "items": lambda store: len(store.items),
    "specials": lambda store: len(store.specials),
}


def find_store(stores: Sequence[Store], slug: str) -> Optional[Store]:
    for store in stores:
        if store.slug == slug:
            return store
    return None


def category_breakdown(store: Store) -> List[CategoryCount]:
    return count_categories([store])


def rating_band(rating: float) -> str:
    if rating >= 4.5:
        return "high"
    if rating >= 4.0:
        return "medium"
    return "low"


def specials_coverage(stores: Sequence[Store]) -> SpecialsCoverage:
    """Which stores run each special, and which stores run none at all.

    Specials are keyed by their exact name. The description shown is the one from
    the first store carrying the special.
    """
    descriptions: Dict[str, str] = {}
    carriers: Dict[str, List[str]] = {}
    for store in stores:
        for special in store.specials:
            if special.name not in carriers:
                descriptions[special.name] = special.description
                carriers[special.name] = []
            carriers[special.name].append(store.name)

    entries = []
    for name, carrier_names in carriers.items():
        carrying = set(carrier_names)
        entries.append(
            SpecialCoverage(
                name=name,
                description=descriptions[name],
                stores=tuple(carrier_names),
                missing_from=tuple(store.name for store in stores if store.name not in carrying),
            )
        )
    entries.sort(key=lambda entry: len(entry.stores), reverse=True)

    return SpecialsCoverage(
        specials=tuple(entries),
        stores_with_specials=sum(1 for store in stores if store.specials),
        stores_without_specials=tuple(store.name for store in stores if not store.specials),
    )


def compare_stores(stores: Sequence[Store], slugs: Sequence[str]) -> StoreComparison:
    """Side-by-side metrics, category counts and specials for 2 to 4 stores.

    Raises:
        ValueError: if the slug count is out of range, repeats, or names an unknown store.
    """
    if len(set(slugs)) != len(slugs):
        raise ValueError("each store can only be compared once")
    if not MIN_COMPARE <= len(slugs) <= MAX_COMPARE:
        raise ValueError(f"compare needs between {MIN_COMPARE} and {MAX_COMPARE} stores, got {len(slugs)}")

    selected: List[Store] = []
    for slug in slugs:
        store = find_store(stores, slug)
        if store is None:
            raise ValueError(f"unknown store: {slug}")
        selected.append(store)

    metrics = tuple(
        StoreMetrics(
            slug=store.slug,
            name=store.name,
            rating=store.rating,
            review_count=store.review_count,
            item_count=len(store.items),
            special_count=len(store.specials),
        )
        for store in selected
    )

    per_store_counts = [{entry.name: entry.count for entry in category_breakdown(store)} for store in selected]
    category_names = sorted({name for counts in per_store_counts for name in counts})
    categories = []
    for name in category_names:
        counts = tuple(store_counts.get(name, 0) for store_counts in per_store_counts)
        categories.append(CategoryComparison(name=name, counts=counts, has_gap=max(counts) > 0 and 0 in counts))

    special_names = sorted({special.name for store in selected for special in store.specials})
    specials = tuple(
        SpecialComparison(
            name=name,
            present=tuple(any(special.name == name for special in store.specials) for store in selected),
        )
        for name in special_names
    )

    return StoreComparison(metrics=metrics, categories=tuple(categories), specials=specials)


def search_stores(
    stores: Sequence[Store],
    query: str = "",
    sort_key: str = "name",
    descending: bool = False,
) -> List[Store]:
    """Filter by name, region or location substring and sort for the store table."""
    if sort_key not in SORT_KEYS:
        raise ValueError(f"unknown sort key: {sort_key}")

    needle = query.strip().lower()
    matches = [
        store
        for store in stores
        if needle in store.name.lower() or needle in store.region.value.lower() or needle in store.location.lower()
    ]
    return sorted(matches, key=SORT_KEYS[sort_key], reverse=descending)
