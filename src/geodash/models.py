"""Data model definitions — explicit boundaries between store, query, selection, and view layers."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Literal

Status = Literal["Active", "Inactive", "Completed", "Pending"]
SortOrder = Literal["asc", "desc"]

STATUSES: tuple[Status, ...] = ("Active", "Inactive", "Completed", "Pending")
PAGE_SIZES: tuple[int, ...] = (10, 25, 50, 100)
DEFAULT_PAGE_SIZE = 50

# Record attributes a table header can sort on
SORTABLE_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "latitude",
    "longitude",
    "status",
    "last_updated",
)


class InvalidQueryError(ValueError):
    """QueryParams outside the accepted domain."""


@dataclass(frozen=True)
class Record:
    """A single geographic project. Never mutated after generation."""

    id: str  # "project-<n>", unique within a store snapshot
    name: str  # "Solar Farm Alpha 3"
    latitude: float  # Decimal degrees, [-90, 90]
    longitude: float  # Decimal degrees, [-180, 180]
    status: Status
    last_updated: date


@dataclass(frozen=True)
class QueryParams:
    """Filter/sort/page parameters for one query.

    The ``with_*`` helpers are the only sanctioned way to move between
    parameter sets: changing the filter, the sort, or the page size always
    lands back on page 1.
    """

    filter_text: str = ""
    sort_key: str | None = None
    sort_order: SortOrder = "asc"
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvalidQueryError(f"page must be >= 1, got {self.page}")
        if self.page_size not in PAGE_SIZES:
            raise InvalidQueryError(
                f"page_size must be one of {PAGE_SIZES}, got {self.page_size}"
            )
        if self.sort_order not in ("asc", "desc"):
            raise InvalidQueryError(f"unknown sort order: {self.sort_order!r}")

    def with_filter(self, filter_text: str) -> "QueryParams":
        return replace(self, filter_text=filter_text, page=1)

    def with_sort(self, sort_key: str) -> "QueryParams":
        """Sort by ``sort_key``; repeated on an ascending column it flips to descending."""
        if self.sort_key == sort_key and self.sort_order == "asc":
            order: SortOrder = "desc"
        else:
            order = "asc"
        return replace(self, sort_key=sort_key, sort_order=order, page=1)

    def with_page(self, page: int) -> "QueryParams":
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> "QueryParams":
        return replace(self, page_size=page_size, page=1)


@dataclass(frozen=True)
class QueryResult:
    """One page of the filtered-and-sorted record set."""

    items: tuple[Record, ...]  # Length <= page_size
    total_matched: int  # Size of the filtered set before pagination


@dataclass(frozen=True)
class FetchResponse:
    """Envelope returned by the simulated fetch."""

    data: tuple[Record, ...]
    total: int
    page: int
    page_size: int


@dataclass(frozen=True)
class Unselected:
    """No record is selected."""


@dataclass(frozen=True)
class Selected:
    """Exactly one record is selected."""

    record_id: str


Selection = Unselected | Selected


@dataclass(frozen=True)
class MapFocus:
    """Instruction for the map: recenter on a record, enlarge its marker, open its popup."""

    record_id: str
    latitude: float
    longitude: float
    zoom: int = 10
    open_popup: bool = True


@dataclass(frozen=True)
class RowFocus:
    """Instruction for the table: highlight a row and scroll it into view."""

    record_id: str
    scroll_into_view: bool = True


@dataclass(frozen=True)
class MapView:
    """Camera for the map surface."""

    center_lat: float
    center_lng: float
    zoom: float
