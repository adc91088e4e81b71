"""Refresh store URLs from the stores.csv directory listing."""

import logging
import re
from typing import Dict, List, Optional, Sequence

from menu_dashboard.etl.csv_line import parse_csv_line, split_lines
from menu_dashboard.models import Store

logger = logging.getLogger(__name__)

UBER_EATS_STORE_RE = re.compile(r"ubereats\.com/(?:za/)?store/([^/]+)")


def extract_url_slug(url: str) -> Optional[str]:
    """Return the path segment after ``/store/`` in an Uber Eats URL, if any."""
    match = UBER_EATS_STORE_RE.search(url or "")
    return match.group(1) if match else None


def build_url_lookup(stores_csv_content: str) -> Dict[str, str]:
    """Map URL slug -> full URL using the first Uber Eats link found in each row."""
    lookup: Dict[str, str] = {}
    for line in split_lines(stores_csv_content)[1:]:
        for value in parse_csv_line(line):
            slug = extract_url_slug(value)
            if slug:
                lookup[slug] = value.strip()
                break
    return lookup


def merge_store_urls(stores: Sequence[Store], stores_csv_content: str) -> List[Store]:
    """Swap in the directory's URL for every store whose URL slug it lists.

    Matched stores are copied with the new URL; unmatched stores are returned as
    the same objects. The input stores are never modified.
    """
    if len(split_lines(stores_csv_content)) < 2:
        return list(stores)

    lookup = build_url_lookup(stores_csv_content)
    merged: List[Store] = []
    replaced = 0
    for store in stores:
        slug = extract_url_slug(store.uber_eats_url)
        url = lookup.get(slug) if slug else None
        if url:
            merged.append(store.with_url(url))
            replaced += 1
        else:
            merged.append(store)

    logger.info("Merged store URLs: directory_entries=%d replaced=%d", len(lookup), replaced)
    return merged
