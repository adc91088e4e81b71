"""Turn the item-level extract CSV into Store objects."""

import logging
import math
import re
from typing import Dict, List, Sequence, Set

from menu_dashboard.etl.classify import classify_region, is_special_category
from menu_dashboard.etl.csv_line import parse_csv_line, split_lines
from menu_dashboard.etl.normalize import generate_slug, normalize_special_name
from menu_dashboard.models import MenuItem, Special, Store

logger = logging.getLogger(__name__)

# Fixed column positions in extract-data.csv. The *_citation columns after each
# value hold the page the value was scraped from; special_name (12) and
# special_description (14) are present but unused.
COL_ITEM_NAME = 0
COL_ITEM_CITATION = 1
COL_CATEGORY = 2
COL_STORE_NAME = 4
COL_STORE_URL = 5
COL_LOCATION = 6
COL_RATING = 8
COL_REVIEW_COUNT = 10

MIN_FIELDS = 10

_LEADING_FLOAT_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def _field(fields: Sequence[str], index: int) -> str:
    if index < len(fields):
        return fields[index].strip()
    return ""


def parse_rating(raw: str) -> float:
    """Read the leading number of ``raw``; anything unreadable counts as 0."""
    match = _LEADING_FLOAT_RE.match(raw or "")
    if not match:
        return 0.0
    try:
        value = float(match.group(1))
    except ValueError:
        return 0.0
    # "1e999" overflows to inf; treat it like any other unreadable rating.
    return value if math.isfinite(value) else 0.0


def parse_review_count(raw: str) -> int:
    """Keep only the digits of ``raw`` ("1,200+ ratings" -> 1200); empty counts as 0."""
    digits = _NON_DIGIT_RE.sub("", raw or "")
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        # Past the interpreter's int conversion limit.
        return 0


def parse_extract_csv(csv_content: str) -> List[Store]:
    """Group extract rows into stores, in the order each store first appears.

    Rows whose category looks promotional become specials, deduplicated per store
    by symbol-stripped name; every other row becomes a menu item. Rows with fewer
    than ten fields or without a store or item name are skipped.
    """
    lines = split_lines(csv_content)
    if len(lines) < 2:
        return []

    stores: Dict[str, Store] = {}
    seen_specials: Dict[str, Set[str]] = {}
    skipped = 0

    for line_no, line in enumerate(lines[1:], start=2):
        fields = parse_csv_line(line)
        if len(fields) < MIN_FIELDS:
            logger.debug("Skipping line %d: expected %d fields, got %d", line_no, MIN_FIELDS, len(fields))
            skipped += 1
            continue

        store_name = _field(fields, COL_STORE_NAME)
        item_name = _field(fields, COL_ITEM_NAME)
        if not store_name or not item_name:
            logger.debug("Skipping line %d: missing store or item name", line_no)
            skipped += 1
            continue

        store = stores.get(store_name)
        if store is None:
            location = _field(fields, COL_LOCATION)
            store = Store(
                name=store_name,
                location=location,
                region=classify_region(location),
                rating=parse_rating(_field(fields, COL_RATING)),
                review_count=parse_review_count(_field(fields, COL_REVIEW_COUNT)),
                uber_eats_url=_field(fields, COL_STORE_URL),
                slug=generate_slug(store_name),
            )
            stores[store_name] = store
            seen_specials[store_name] = set()

        category = _field(fields, COL_CATEGORY)
        citation_url = _field(fields, COL_ITEM_CITATION)

        if is_special_category(category):
            key = normalize_special_name(item_name)
            if key in seen_specials[store_name]:
                continue
            seen_specials[store_name].add(key)
            store.specials.append(Special(name=item_name, description=category, citation_url=citation_url))
        else:
            store.items.append(MenuItem(name=item_name, category=category, citation_url=citation_url))

    logger.info(
        "Parsed extract: rows=%d skipped=%d stores=%d",
        len(lines) - 1,
        skipped,
        len(stores),
    )
    return list(stores.values())
