"""Keyword heuristics that bucket stores into regions and rows into specials."""

from typing import Sequence, Tuple

from menu_dashboard.etl.normalize import normalize_special_name
from menu_dashboard.models import Region

# Checked in order: Pretoria and the KZN suburbs must win before the broad Gauteng list.
REGION_RULES: Sequence[Tuple[Tuple[str, ...], Region]] = (
    (
        ("KwaZulu", "KZN", "Umhlanga", "Ballito", "Durban", "Hillcrest", "Florida Road"),
        Region.KZN,
    ),
    (("Pretoria", "Menlyn", "Brooklyn"), Region.PRETORIA),
    (
        (
            "Cape Town",
            "Western Cape",
            "Stellenbosch",
            "Paarl",
            "Foreshore",
            "Waterfront",
            "Century City",
            "Claremont",
            "Willowbridge",
            "Camps Bay",
            "Durbanville",
            "Paardevlei",
            "Blouberg",
            "Meadowridge",
            "Westlake",
            "Hans Strijdom",
            ", WC ",
            "Haasendal",
            "Old Biscuit Mill",
            "Belvedere",
            "Canal Walk",
            "Cavendish",
        ),
        Region.WESTERN_CAPE,
    ),
    (
        (
            "Gauteng",
            "Johannesburg",
            "Sandton",
            "Rosebank",
            "Fourways",
            "Bedfordview",
            "Bryanston",
            "Greenside",
            "Parkhurst",
            "Melrose",
            "Lynnwood",
            "Dainfern",
            "Midrand",
            "Benmore",
            "Northcliff",
            "Montecasino",
        ),
        Region.GAUTENG,
    ),
)

DEFAULT_REGION = Region.GAUTENG

SPECIAL_MARKERS: Tuple[str, ...] = (
    "hot this week",
    "weekly hot deal",
    "msc cruise",
    "summer",
    "special",
    "combo",
    "promotion",
    "giveaway",
    "win a",
)


def classify_region(location: str, rules: Sequence[Tuple[Tuple[str, ...], Region]] = REGION_RULES) -> Region:
    """Return the region of the first rule with a keyword found in ``location``."""
    haystack = location.lower()
    for keywords, region in rules:
        if any(keyword.lower() in haystack for keyword in keywords):
            return region
    return DEFAULT_REGION


def is_special_category(category: str, markers: Sequence[str] = SPECIAL_MARKERS) -> bool:
    """True when ``category`` reads like a promotion rather than a menu section."""
    lowered = normalize_special_name(category).lower()
    return any(marker in lowered for marker in markers)
