from conftest import make_store

from menu_dashboard.etl import stats
from menu_dashboard.models import CategoryCount, MenuItem, Region, Special


def test_round_half_up():
    assert stats.round_half_up(4.25) == 4.3
    assert stats.round_half_up(4.0) == 4.0
    assert stats.round_half_up(3.94) == 3.9


def test_get_overview_stats_totals():
    stores = [
        make_store(
            name="Store A",
            rating=4.5,
            items=[MenuItem("Pizza", "Pizza"), MenuItem("Pasta", "Pasta")],
            specials=[Special("Deal 1", "Hot deal")],
        ),
        make_store(name="Store B", rating=3.5, items=[MenuItem("Salad", "Salads")]),
    ]

    result = stats.get_overview_stats(stores)

    assert result.total_stores == 2
    assert result.total_items == 3
    assert result.total_specials == 1
    assert result.avg_rating == 4.0


def test_get_overview_stats_empty():
    result = stats.get_overview_stats([])
    assert result.avg_rating == 0
    assert result.total_stores == 0
    assert result.top_stores == [] and result.bottom_stores == []
    assert result.category_distribution == []


def test_get_overview_stats_region_counts():
    stores = [
        make_store(region=Region.WESTERN_CAPE),
        make_store(region=Region.WESTERN_CAPE),
        make_store(region=Region.GAUTENG),
        make_store(region=Region.KZN),
    ]
    assert stats.get_overview_stats(stores).region_counts == {"Western Cape": 2, "Gauteng": 1, "KZN": 1}


def test_category_distribution_sorted_descending_with_stable_ties():
    stores = [
        make_store(items=[MenuItem("P1", "Pizza"), MenuItem("S1", "Salads"), MenuItem("D1", "Desserts")]),
        make_store(items=[MenuItem("Pa1", "Pasta"), MenuItem("Pa2", "Pasta"), MenuItem("P2", "Pizza")]),
    ]

    result = stats.get_overview_stats(stores).category_distribution

    assert result == [
        CategoryCount("Pizza", 2),
        CategoryCount("Pasta", 2),
        CategoryCount("Salads", 1),
        CategoryCount("Desserts", 1),
    ]


def test_top_and_bottom_stores():
    stores = [make_store(name=f"Store {i}", rating=i + 1) for i in range(8)]

    result = stats.get_overview_stats(stores)

    assert [s.rating for s in result.top_stores] == [8, 7, 6, 5, 4]
    assert [s.rating for s in result.bottom_stores] == [1, 2, 3, 4, 5]


def test_bottom_stores_tie_order_comes_from_descending_tail():
    stores = [make_store(name=name, rating=rating) for name, rating in
              [("A", 3.0), ("B", 3.0), ("C", 3.0), ("D", 4.0), ("E", 3.0), ("F", 3.0), ("G", 3.0)]]

    result = stats.get_overview_stats(stores)

    # Descending order is D, A, B, C, E, F, G; the tail reversed puts G first,
    # where a fresh ascending sort would start with A.
    assert [s.name for s in result.bottom_stores] == ["G", "F", "E", "C", "B"]
    assert [s.name for s in result.top_stores] == ["D", "A", "B", "C", "E"]


def test_fewer_than_five_stores():
    stores = [make_store(name="A", rating=4.5), make_store(name="B", rating=3.0)]
    result = stats.get_overview_stats(stores)
    assert [s.name for s in result.top_stores] == ["A", "B"]
    assert [s.name for s in result.bottom_stores] == ["B", "A"]


def test_get_overview_stats_does_not_mutate_input():
    stores = [make_store(name="Low", rating=1.0), make_store(name="High", rating=5.0)]
    stats.get_overview_stats(stores)
    assert [s.name for s in stores] == ["Low", "High"]


def test_overview_to_dict_is_json_friendly():
    payload = stats.get_overview_stats([make_store(region=Region.KZN)]).to_dict()
    assert payload["region_counts"] == {"KZN": 1}
    assert payload["top_stores"][0]["region"] == "KZN"


def test_overview_stats_with_overflowing_rating_cell():
    from conftest import EXTRACT_HEADER, extract_row

    from menu_dashboard.etl.extract import parse_extract_csv

    content = "\n".join([EXTRACT_HEADER, extract_row(store="A", rating="1e999"), extract_row(store="B", rating="4.0")])

    result = stats.get_overview_stats(parse_extract_csv(content))

    assert result.avg_rating == 2.0
    assert [s.name for s in result.top_stores] == ["B", "A"]


def test_empty_overview_avg_rating_is_float():
    assert isinstance(stats.get_overview_stats([]).avg_rating, float)
