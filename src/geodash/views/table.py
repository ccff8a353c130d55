"""Table view helpers that turn a loaded page into what ``st.dataframe`` shows."""

from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd
from pandas.io.formats.style import Styler

from geodash.i18n import t
from geodash.models import QueryParams, Record, RowFocus
from geodash.query import page_window, total_pages

# (record field, i18n key) in display order
COLUMNS: tuple[tuple[str, str], ...] = (
    ("name", "col_name"),
    ("latitude", "col_latitude"),
    ("longitude", "col_longitude"),
    ("status", "col_status"),
    ("last_updated", "col_last_updated"),
)

_SELECTED_ROW_STYLE = "background-color: rgba(25, 118, 210, 0.18); font-weight: 600"
ROW_HEIGHT_PX = 35
DEFAULT_HEIGHT_PX = 420


def sort_indicator(params: QueryParams, field: str) -> str:
    if params.sort_key != field:
        return ""
    return " ↑" if params.sort_order == "asc" else " ↓"


def column_label(params: QueryParams, field: str, key: str, lang: str) -> str:
    return t(key, lang) + sort_indicator(params, field)


def page_frame(records: Sequence[Record], params: QueryParams, lang: str = "en") -> pd.DataFrame:
    """One row per record, coordinates rounded to 4 places, indexed by record id."""
    labels = {field: column_label(params, field, key, lang) for field, key in COLUMNS}
    rows = [
        {
            labels["name"]: r.name,
            labels["latitude"]: round(r.latitude, 4),
            labels["longitude"]: round(r.longitude, 4),
            labels["status"]: r.status,
            labels["last_updated"]: r.last_updated.isoformat(),
        }
        for r in records
    ]
    frame = pd.DataFrame(rows, columns=list(labels.values()))
    frame.index = pd.Index([r.id for r in records], name="id")
    return frame


def loading_frame(params: QueryParams, lang: str = "en") -> pd.DataFrame:
    """Single placeholder row shown in the table while a reload is running."""
    labels = [column_label(params, field, key, lang) for field, key in COLUMNS]
    row = {label: "" for label in labels}
    row[labels[0]] = t("loading", lang)
    return pd.DataFrame([row], columns=labels)


def highlight_selected(frame: pd.DataFrame, selected_id: str | None) -> Styler:
    """Styler that shades the row whose index equals ``selected_id``."""

    def _row_style(row: pd.Series) -> list[str]:
        style = _SELECTED_ROW_STYLE if row.name == selected_id else ""
        return [style] * len(row)

    return frame.style.apply(_row_style, axis=1).format(precision=4)


def footer_text(page: int, page_size: int, total: int, lang: str = "en") -> str:
    """Pagination summary: "Showing X to Y of Z results", or "No results"."""
    if total <= 0:
        return t("no_results", lang)
    first, last = page_window(page, page_size, total)
    return t("showing", lang).format(first=first, last=last, total=total)


def page_label(page: int, page_size: int, total: int, lang: str = "en") -> str:
    return t("page_of", lang).format(page=page, pages=total_pages(total, page_size))


def nav_disabled(page: int, page_size: int, total: int) -> dict[str, bool]:
    """Which of First/Previous/Next/Last are disabled on ``page``."""
    at_start = page <= 1
    at_end = page >= total_pages(total, page_size)
    return {"first": at_start, "prev": at_start, "next": at_end, "last": at_end}


def row_id_from_event(event: Mapping[str, Any] | None, records: Sequence[Record]) -> str | None:
    """Record id for the row picked in a ``st.dataframe`` selection event."""
    if not event:
        return None
    rows = (event.get("selection") or {}).get("rows") or []
    if not rows:
        return None
    position = rows[0]
    if 0 <= position < len(records):
        return records[position].id
    return None


def focus_position(records: Sequence[Record], focus: RowFocus | None) -> int | None:
    """Row index of the focused record on this page, or None."""
    if focus is None:
        return None
    return next((i for i, r in enumerate(records) if r.id == focus.record_id), None)


def table_height(row_count: int, focused_row: int | None = None) -> int:
    """Viewport height for ``st.dataframe``; grows so a focused row is on screen.

    The header takes one row height.
    """
    if focused_row is None:
        return DEFAULT_HEIGHT_PX
    needed = (focused_row + 2) * ROW_HEIGHT_PX
    full = (row_count + 1) * ROW_HEIGHT_PX
    return max(DEFAULT_HEIGHT_PX, min(needed, full))
