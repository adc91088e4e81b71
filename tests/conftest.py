import sys
from pathlib import Path

import pytest

# Ensure `menu_dashboard` is importable when running pytest from the project root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from menu_dashboard.models import MenuItem, Region, Special, Store  # noqa: E402

EXTRACT_HEADER = (
    "item_name,item_name_citation,category,category_citation,store_name,store_name_citation,"
    "store_location,store_location_citation,store_rating,store_rating_citation,store_review_count,"
    "store_review_count_citation,special_name,special_name_citation,special_description,"
    "special_description_citation"
)


def extract_row(
    item="Margherita",
    category="Pizza",
    store="Col'Cacchio Sandton",
    location="Sandton, Johannesburg",
    rating="4.5",
    reviews="1,200+",
    item_url="https://example.com/item",
    store_url="https://www.ubereats.com/za/store/colcacchio-sandton/abc123",
):
    def quote(value):
        if "," in value or '"' in value:
            return '"' + value.replace('"', '""') + '"'
        return value

    values = [
        item, item_url, category, "", store, store_url, location, "",
        rating, "", reviews, "", "", "", "", "",
    ]
    return ",".join(quote(v) for v in values)


def make_store(**overrides):
    values = dict(
        name="Test Store",
        location="Test Location",
        region=Region.GAUTENG,
        rating=4.0,
        review_count=100,
        uber_eats_url="https://www.ubereats.com/za/store/test/abc",
        slug="test-store",
        items=[],
        specials=[],
    )
    values.update(overrides)
    return Store(**values)


@pytest.fixture
def sample_stores():
    return [
        make_store(
            name="Store A",
            slug="store-a",
            location="Menlyn, Pretoria",
            region=Region.PRETORIA,
            rating=4.6,
            review_count=500,
            items=[
                MenuItem(name="Margherita", category="Pizza"),
                MenuItem(name="Regina", category="Pizza"),
                MenuItem(name="Alfredo", category="Pasta"),
            ],
            specials=[Special(name="Combo Deal", description="Combos")],
        ),
        make_store(
            name="Store B",
            slug="store-b",
            location="Umhlanga, KZN",
            region=Region.KZN,
            rating=3.8,
            review_count=40,
            items=[MenuItem(name="Greek", category="Salads")],
            specials=[],
        ),
        make_store(
            name="Store C",
            slug="store-c",
            location="Foreshore, Cape Town",
            region=Region.WESTERN_CAPE,
            rating=4.2,
            review_count=1200,
            items=[MenuItem(name="Four Cheese", category="Pizza")],
            specials=[
                Special(name="Combo Deal", description="Combos"),
                Special(name="WIN A MSC CRUISE", description="Promotion"),
            ],
        ),
    ]
