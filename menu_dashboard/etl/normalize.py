"""Name cleanup helpers used for comparisons and identifiers."""

import re

# Pictographs, dingbats, variation selectors, ZWJ, keycap, BOM and tag characters.
_SYMBOL_RE = re.compile(
    "["
    "\U0001F300-\U0001F9FF"
    "\u2600-\u26FF"
    "\u2700-\u27BF"
    "\uFE00-\uFE0F"
    "\u200D"
    "\u20E3"
    "\uFEFF"
    "\U000E0020-\U000E007F"
    "]"
)
_SLUG_DROP_RE = re.compile(r"['&]")
_SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")


def normalize_special_name(name: str) -> str:
    """Strip decorative symbols from ``name`` for equality checks.

    Only used to compare names; stored names keep their original text.
    """
    return _SYMBOL_RE.sub("", name).strip()


def generate_slug(name: str) -> str:
    """Build a URL-safe identifier from a store name.

    Apostrophes and ampersands vanish outright; any other run of characters outside
    ``[a-z0-9]`` becomes one hyphen.
    """
    slug = _SLUG_DROP_RE.sub("", name.lower())
    slug = _SLUG_SEPARATOR_RE.sub("-", slug)
    return slug.strip("-")
