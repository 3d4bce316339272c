"""Filter, sort and paginate transaction listings.

The pipeline is strictly ordered: filter, then sort, then slice a page. It
never mutates the caller's collection and never corrects a stale page index;
a page past the end simply comes back empty.
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from ..models.query import ALL, FilterSpec, PageSpec, QueryResult, QuerySpec, SortSpec
from ..models.transaction import TransactionRecord

logger = logging.getLogger(__name__)

RecordInput = Union[TransactionRecord, Mapping[str, Any]]

# Pagers show every page up to this count, otherwise a condensed window.
MAX_FULL_PAGER = 5


def coerce_records(records: Iterable[RecordInput]) -> list[TransactionRecord]:
    return [
        rec if isinstance(rec, TransactionRecord) else TransactionRecord.from_raw(rec)
        for rec in records
    ]


def matches(record: TransactionRecord, filters: FilterSpec) -> bool:
    """Whether ``record`` passes every active filter."""

    term = (filters.search_term or "").casefold()
    if term:
        haystack = (record.name, record.id, record.description, record.account)
        if not any(term in field.casefold() for field in haystack if field):
            return False
    if filters.status_filter != ALL and record.status != filters.status_filter:
        return False
    if filters.account_filter != ALL and record.account != filters.account_filter:
        return False
    if filters.type_filter != ALL and record.type != filters.type_filter:
        return False
    if filters.category_filter != ALL and record.category != filters.category_filter:
        return False
    return True


def filter_records(records: Iterable[RecordInput], filters: FilterSpec) -> list[TransactionRecord]:
    return [rec for rec in coerce_records(records) if matches(rec, filters)]


def _text_key(value: Optional[str]) -> tuple[str, str]:
    """Collation key: accents and case folded away, raw text breaks ties."""

    text = value or ""
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (folded.casefold(), text)


SORT_KEYS: dict[str, Callable[[TransactionRecord], Any]] = {
    "amount": lambda rec: rec.amount,
    "name": lambda rec: _text_key(rec.name),
    "account": lambda rec: _text_key(rec.account),
    "date": lambda rec: rec.occurred_at,
}


def sort_records(records: Sequence[TransactionRecord], sort: SortSpec) -> list[TransactionRecord]:
    """Stable sort by ``sort.key``; unknown keys keep the incoming order.

    Records comparing equal keep their relative order in both directions.
    """

    key = SORT_KEYS.get(sort.key)
    if key is None:
        logger.debug("Unknown sort key %r; keeping input order", sort.key)
        return list(records)
    return sorted(records, key=key, reverse=sort.descending)


def paginate(records: Sequence[TransactionRecord], page: PageSpec) -> QueryResult:
    """Slice one page out of an already filtered and sorted list.

    A size below 1 is treated as 1. An index below 1 or past the last page
    yields an empty slice.
    """

    size = max(1, int(page.size))
    index = int(page.index)
    total = len(records)
    if index < 1:
        items: tuple[TransactionRecord, ...] = ()
    else:
        start = (index - 1) * size
        items = tuple(records[start:start + size])
    return QueryResult(page_items=items, total_count=total, page_index=index, page_size=size)


def run_query(records: Iterable[RecordInput], spec: QuerySpec | None = None) -> QueryResult:
    """Run the full filter, sort and paginate pipeline for ``spec``."""

    spec = spec or QuerySpec()
    filtered = filter_records(records, spec.filter)
    ordered = sort_records(filtered, spec.sort)
    result = paginate(ordered, spec.page)
    logger.debug(
        "Query matched %d rows; page %d/%d",
        result.total_count,
        result.page_index,
        result.total_pages,
    )
    return result


def filter_options(records: Iterable[RecordInput]) -> dict[str, list[str]]:
    """Distinct values for each filter dropdown, in first-seen order."""

    options: dict[str, list[str]] = {"status": [], "account": [], "category": [], "type": []}
    for rec in coerce_records(records):
        for name, value in (
            ("status", rec.status),
            ("account", rec.account),
            ("category", rec.category),
            ("type", rec.type),
        ):
            if value and value not in options[name]:
                options[name].append(value)
    return options


def toggle_sort(spec: QuerySpec, key: str) -> QuerySpec:
    """Header click: flip direction on the active key, otherwise sort the new key ascending."""

    if spec.sort.key == key:
        direction = "asc" if spec.sort.descending else "desc"
        return spec.with_sort(key, direction)
    return spec.with_sort(key, "asc")


def page_window(page_index: int, total_pages: int) -> list[Optional[int]]:
    """Page numbers for the pager, with ``None`` where an ellipsis goes.

    Up to five pages are all listed. Beyond that the pager shows the first
    page, the current page and the last page, with gaps between them.
    """

    if total_pages <= 0:
        return []
    if total_pages <= MAX_FULL_PAGER:
        return list(range(1, total_pages + 1))

    window: list[Optional[int]] = [1]
    if page_index > 3:
        window.append(None)
    if page_index not in (1, total_pages) and 1 <= page_index <= total_pages:
        window.append(page_index)
    if page_index < total_pages - 2:
        window.append(None)
    window.append(total_pages)
    return window

