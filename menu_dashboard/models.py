"""Core data models shared by the menu dashboard pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Tuple


class Region(str, Enum):
    GAUTENG = "Gauteng"
    WESTERN_CAPE = "Western Cape"
    KZN = "KZN"
    PRETORIA = "Pretoria"


def _plain(value: Any) -> Any:
    """Flatten enums and tuples left behind by ``asdict`` into JSON-friendly values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {_plain(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True, slots=True)
class MenuItem:
    name: str
    category: str
    citation_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Special:
    """Promotional listing; ``description`` keeps the raw category text that flagged it."""

    name: str
    description: str
    citation_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class Store:
    """One restaurant as seen in the extract.

    ``items`` and ``specials`` are appended to while the extract parser scans rows
    and are left alone afterwards; later stages copy stores instead of editing them.
    """

    name: str
    location: str
    region: Region
    rating: float
    review_count: int
    uber_eats_url: str
    slug: str
    items: List[MenuItem] = field(default_factory=list)
    specials: List[Special] = field(default_factory=list)

    def with_url(self, url: str) -> "Store":
        """Return a copy carrying ``url``; every other field is shared with ``self``."""
        return replace(self, uber_eats_url=url)

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class DashboardData:
    stores: Tuple[Store, ...]
    generated_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stores": [store.to_dict() for store in self.stores],
            "generated_at": self.generated_at,
        }


@dataclass(frozen=True, slots=True)
class CategoryCount:
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class OverviewStats:
    total_stores: int
    total_items: int
    total_specials: int
    avg_rating: float
    region_counts: Dict[str, int]
    category_distribution: List[CategoryCount]
    top_stores: List[Store]
    bottom_stores: List[Store]

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class SpecialCoverage:
    name: str
    description: str
    stores: Tuple[str, ...]
    missing_from: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class SpecialsCoverage:
    specials: Tuple[SpecialCoverage, ...]
    stores_with_specials: int
    stores_without_specials: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class StoreMetrics:
    slug: str
    name: str
    rating: float
    review_count: int
    item_count: int
    special_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CategoryComparison:
    """Item counts for one category, one entry per compared store."""

    name: str
    counts: Tuple[int, ...]
    has_gap: bool

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class SpecialComparison:
    name: str
    present: Tuple[bool, ...]

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class StoreComparison:
    metrics: Tuple[StoreMetrics, ...]
    categories: Tuple[CategoryComparison, ...]
    specials: Tuple[SpecialComparison, ...]

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))
