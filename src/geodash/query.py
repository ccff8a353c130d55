"""Query engine: filtering, sorting, and pagination over an in-memory record tuple.

Every call recomputes from scratch; there is no index to keep in sync.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

from geodash.models import SORTABLE_FIELDS, QueryParams, QueryResult, Record

# Fields the text filter inspects
FILTER_FIELDS: tuple[str, ...] = ("name", "status", "id")


def matches(record: Record, needle: str) -> bool:
    """Case-insensitive substring test against name, status, and id.

    ``needle`` must already be case-folded.
    """
    return any(needle in getattr(record, f).casefold() for f in FILTER_FIELDS)


def filter_records(records: Iterable[Record], filter_text: str) -> list[Record]:
    """Keep records matching ``filter_text``. Blank text keeps everything."""
    if not filter_text.strip():
        return list(records)
    needle = filter_text.casefold()
    return [r for r in records if matches(r, needle)]


def _sort_value(value: Any) -> Any:
    # Strings collate case-insensitively first, then by raw text so "a" < "B" < "b"
    if isinstance(value, str):
        return (value.casefold(), value)
    if isinstance(value, date):
        return value.toordinal()
    return value


def sort_records(
    records: Sequence[Record], sort_key: str | None, sort_order: str = "asc"
) -> list[Record]:
    """Stable sort by a record field.

    An absent or unknown ``sort_key`` leaves insertion order untouched.
    ``desc`` reverses the comparison but keeps equal records in their
    original relative order.
    """
    if sort_key not in SORTABLE_FIELDS:
        return list(records)
    return sorted(
        records,
        key=lambda r: _sort_value(getattr(r, sort_key)),
        reverse=sort_order == "desc",
    )


def paginate(records: Sequence[Record], page: int, page_size: int) -> tuple[Record, ...]:
    """Slice ``[(page-1)*page_size, page*page_size)``. A page past the end is empty."""
    start = (page - 1) * page_size
    return tuple(records[start : start + page_size])


def run_query(records: Iterable[Record], params: QueryParams) -> QueryResult:
    """Filter, sort, and paginate ``records`` according to ``params``.

    Args:
        records: Full record collection (not mutated).
        params: Filter text, sort key/order, page and page size.

    Returns:
        QueryResult with the requested page and the total match count.
    """
    matched = filter_records(records, params.filter_text)
    ordered = sort_records(matched, params.sort_key, params.sort_order)
    return QueryResult(
        items=paginate(ordered, params.page, params.page_size),
        total_matched=len(ordered),
    )


def total_pages(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total > 0 else 0


def clamp_page(page: int, total: int, page_size: int) -> int:
    """Pull ``page`` into ``[1, total_pages]`` (page 1 when nothing matched)."""
    return max(1, min(page, total_pages(total, page_size)))


def page_window(page: int, page_size: int, total: int) -> tuple[int, int]:
    """1-based (first, last) row numbers shown on ``page``; (0, 0) when the page is empty."""
    if total <= 0:
        return 0, 0
    first = (page - 1) * page_size + 1
    if first > total:
        return 0, 0
    return first, min(page * page_size, total)
