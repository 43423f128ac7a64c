from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from tradein.data_models import TradeValuationBracket

# (inclusive lower bound, label), newest first
YEAR_BUCKETS: Tuple[Tuple[int, str], ...] = (
    (2025, "2025-2029"),
    (2020, "2020-2024"),
    (2015, "2015-2019"),
    (2010, "2010-2014"),
    (2005, "2005-2009"),
)
YEAR_RANGE_LABELS = frozenset(label for _, label in YEAR_BUCKETS)
OLDEST_BUCKET_YEAR = YEAR_BUCKETS[-1][0]

BracketInput = Union[TradeValuationBracket, Mapping[str, Any]]


def resolve_year_range(year: float) -> Optional[str]:
    for lower, label in YEAR_BUCKETS:
        if year >= lower:
            return label
    return None


def brand_key(brand: str | None) -> str:
    return (brand or "").strip().lower()


class BracketTable:
    """Bracket rows grouped by (brand, year_range), horsepower ascending within a group."""

    def __init__(self, rows: Iterable[BracketInput] = ()) -> None:
        groups: Dict[Tuple[str, str], List[TradeValuationBracket]] = defaultdict(list)
        brands: set[str] = set()
        size = 0
        for raw in rows:
            row = raw if isinstance(raw, TradeValuationBracket) else TradeValuationBracket.from_row(raw)
            key = brand_key(row.brand)
            if not key:
                continue
            brands.add(key)
            size += 1
            if row.year_range in YEAR_RANGE_LABELS:
                groups[(key, row.year_range)].append(row)
        self._groups = {k: tuple(sorted(v, key=lambda r: r.horsepower)) for k, v in groups.items()}
        self._brands = frozenset(brands)
        self._size = size

    def __len__(self) -> int:
        return self._size

    def has_brand(self, brand: str | None) -> bool:
        return brand_key(brand) in self._brands

    def rows_for(self, brand: str | None, year_range: str | None) -> Tuple[TradeValuationBracket, ...]:
        if year_range is None:
            return ()
        return self._groups.get((brand_key(brand), year_range), ())


def match_bracket(rows: Sequence[TradeValuationBracket], horsepower: float) -> Optional[TradeValuationBracket]:
    """Nearest horsepower row; on an equal distance the lower horsepower wins."""
    best: Optional[TradeValuationBracket] = None
    for row in sorted(rows, key=lambda r: r.horsepower):
        if best is None or abs(row.horsepower - horsepower) < abs(best.horsepower - horsepower):
            best = row
    return best
