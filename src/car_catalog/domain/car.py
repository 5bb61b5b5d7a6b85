from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, TypeAlias

# A car is an opaque field mapping; only a handful of fields carry meaning
# for the catalog (id, title/name, model, color, price).
CarRecord: TypeAlias = dict[str, Any]

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


def normalize_brand_key(brand: str) -> str:
    return brand.strip().lower()


def record_title(record: Mapping[str, Any]) -> str | None:
    """Display title of a record: ``title``, falling back to legacy ``name``."""
    for key in ("title", "name"):
        value = record.get(key)
        if isinstance(value, str):
            return value
    return None


def record_id_matches(record: Mapping[str, Any], car_id: Any) -> bool:
    """Compare ids on their string forms so numeric and string ids interoperate."""
    if "id" not in record or record["id"] is None:
        return False
    return str(record["id"]) == str(car_id)


def parse_int(value: Any) -> int | None:
    """Strict integer parse; returns None for anything that is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def parse_number(value: Any) -> float | None:
    """Finite numeric parse; returns None for NaN, infinities and non-numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


@dataclass(frozen=True, slots=True)
class SearchFilters:
    """Optional search predicates, combined with AND semantics.

    Values are kept as received from the caller. A ``model`` or ``max_price``
    that does not parse as a number matches no car.
    """

    title: str | None = None
    model: str | int | None = None
    color: str | None = None
    max_price: str | float | None = None

    def matches(self, record: Mapping[str, Any]) -> bool:
        if self.title and not _contains(record_title(record), self.title):
            return False
        if _is_set(self.model):
            wanted_model = parse_int(self.model)
            if wanted_model is None or parse_int(record.get("model")) != wanted_model:
                return False
        if self.color and not _contains(record.get("color"), self.color):
            return False
        if _is_set(self.max_price):
            limit = parse_number(self.max_price)
            price = parse_number(record.get("price"))
            if limit is None or price is None or price > limit:
                return False
        return True


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _contains(haystack: Any, needle: str) -> bool:
    if not isinstance(haystack, str):
        return False
    return needle.lower() in haystack.lower()


@dataclass(frozen=True, slots=True)
class Paging:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def coerce(cls, page: Any = None, limit: Any = None) -> Paging:
        """
        Build paging from raw query values.

        Absent, non-numeric or non-positive values fall back to the defaults
        instead of raising.
        """
        parsed_page = parse_int(page)
        parsed_limit = parse_int(limit)
        return cls(
            page=parsed_page if parsed_page and parsed_page > 0 else DEFAULT_PAGE,
            limit=parsed_limit if parsed_limit and parsed_limit > 0 else DEFAULT_LIMIT,
        )

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.page * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)

    def slice(self, records: Sequence[CarRecord]) -> list[CarRecord]:
        # Out-of-range pages yield an empty list
        return list(records[self.start : self.end])


@dataclass(frozen=True, slots=True)
class PageInfo:
    total_pages: int
    current_page: int
    on_page: int


@dataclass(frozen=True, slots=True)
class PagedResult:
    """Sliced results plus count metadata; ``page_info`` is None when unpaginated."""

    results: list[CarRecord]
    total: int
    page_info: PageInfo | None = None


def paginate(records: Sequence[CarRecord], paging: Paging) -> PagedResult:
    """Apply page/limit to an already filtered sequence."""
    results = paging.slice(records)
    total = len(records)
    return PagedResult(
        results=results,
        total=total,
        page_info=PageInfo(
            total_pages=paging.total_pages(total),
            current_page=paging.page,
            on_page=len(results),
        ),
    )
