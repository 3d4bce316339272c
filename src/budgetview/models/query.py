"""Query parameters and results for tabular transaction listings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from math import ceil
from typing import Any, Literal, Sequence

from .transaction import TransactionRecord

SortDirection = Literal["asc", "desc"]

ALL = "all"


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Row filters; ``"all"`` disables a dimension and an empty term matches everything."""

    search_term: str = ""
    status_filter: str = ALL
    account_filter: str = ALL
    type_filter: str = ALL
    category_filter: str = ALL


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Sort key and direction."""

    key: str = "date"
    direction: SortDirection = "desc"

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


@dataclass(frozen=True, slots=True)
class PageSpec:
    """One-based page index and page size."""

    index: int = 1
    size: int = 5


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Everything needed to reproduce one listing.

    Running the same spec against the same collection always yields the same
    result. Changing filters or sort through :meth:`with_filter` and
    :meth:`with_sort` returns a spec pointing back at page 1.
    """

    filter: FilterSpec = field(default_factory=FilterSpec)
    sort: SortSpec = field(default_factory=SortSpec)
    page: PageSpec = field(default_factory=PageSpec)

    def with_filter(self, **changes: Any) -> "QuerySpec":
        return replace(
            self,
            filter=replace(self.filter, **changes),
            page=replace(self.page, index=1),
        )

    def with_sort(self, key: str, direction: SortDirection | None = None) -> "QuerySpec":
        return replace(
            self,
            sort=SortSpec(key=key, direction=direction or self.sort.direction),
            page=replace(self.page, index=1),
        )

    def with_page(self, index: int, size: int | None = None) -> "QuerySpec":
        return replace(self, page=PageSpec(index=index, size=size or self.page.size))


@dataclass(frozen=True, slots=True)
class QueryResult:
    """One page of a filtered, sorted listing plus totals for the pager."""

    page_items: Sequence[TransactionRecord]
    total_count: int
    page_index: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.total_count == 0:
            return 0
        return ceil(self.total_count / self.page_size)

    @property
    def has_prev(self) -> bool:
        return self.page_index > 1 and self.total_count > 0

    @property
    def has_next(self) -> bool:
        return 0 < self.page_index < self.total_pages

    @property
    def display_range(self) -> tuple[int, int, int]:
        """``(first, last, total)`` for a "Showing X to Y of Z" caption."""

        if not self.page_items:
            return (0, 0, self.total_count)
        first = (self.page_index - 1) * self.page_size + 1
        last = min(self.page_index * self.page_size, self.total_count)
        return (first, last, self.total_count)

    def to_dict(self) -> dict[str, Any]:
        first, last, total = self.display_range
        return {
            "page_items": [item.to_dict() for item in self.page_items],
            "total_count": self.total_count,
            "total_pages": self.total_pages,
            "page_index": self.page_index,
            "page_size": self.page_size,
            "showing": {"first": first, "last": last, "total": total},
        }
