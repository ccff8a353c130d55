"""Orchestrator: owns the query parameters, the selection, and the loaded page."""

import asyncio
from collections.abc import Sequence
from typing import Literal

from geodash.api import DEFAULT_DELAY, fetch_records
from geodash.debounce import Debouncer
from geodash.logs import get_logger
from geodash.models import DEFAULT_PAGE_SIZE, FetchResponse, MapFocus, QueryParams, Record, RowFocus
from geodash.query import clamp_page
from geodash.selection import SelectionSync

log = get_logger(__name__)

_Reload = Literal["immediate", "debounced"]


class Dashboard:
    """State behind one dashboard session.

    The mutators (``search``, ``sort``, ``change_page``, ``change_page_size``)
    only update parameters and mark a reload as due; ``sync`` performs it.
    Filter edits wait for the debounce interval, everything else reloads at
    once.
    """

    def __init__(
        self,
        records: Sequence[Record],
        fetch_delay: float = DEFAULT_DELAY,
        debounce_delay: float = 0.3,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._records = records
        self._by_id = {r.id: r for r in records}
        self.fetch_delay = fetch_delay
        self.params = QueryParams(page_size=page_size)
        self.selection = SelectionSync(self._by_id.get)
        self.response: FetchResponse | None = None
        self.loading = False
        self.map_focus: MapFocus | None = None
        self.row_focus: RowFocus | None = None
        self._debouncer = Debouncer(debounce_delay)
        self._reload: _Reload | None = "immediate"

        self.selection.on_map_focus(self._remember_map_focus)
        self.selection.on_table_focus(self._remember_row_focus)

    def _remember_map_focus(self, focus: MapFocus) -> None:
        self.map_focus = focus

    def _remember_row_focus(self, focus: RowFocus) -> None:
        self.row_focus = focus

    # --- parameter changes ---

    def _request(self, mode: _Reload) -> None:
        # An immediate reload already covers a pending debounced one
        if self._reload != "immediate":
            self._reload = mode

    def search(self, text: str) -> None:
        if text == self.params.filter_text:
            return
        self.params = self.params.with_filter(text)
        self._request("debounced")

    def sort(self, column: str) -> None:
        self.params = self.params.with_sort(column)
        self._request("immediate")

    def change_page(self, page: int) -> None:
        if self.response is not None:
            page = clamp_page(page, self.response.total, self.params.page_size)
        page = max(1, page)
        if page == self.params.page:
            return
        self.params = self.params.with_page(page)
        self._request("immediate")

    def change_page_size(self, page_size: int) -> None:
        if page_size == self.params.page_size:
            return
        self.params = self.params.with_page_size(page_size)
        self._request("immediate")

    # --- selection ---

    @property
    def selected_id(self) -> str | None:
        return self.selection.selected_id

    def select_row(self, record_id: str) -> None:
        self.selection.select_row(record_id)

    def select_marker(self, record_id: str) -> None:
        self.selection.select_marker(record_id)

    @property
    def data(self) -> tuple[Record, ...]:
        return self.response.data if self.response is not None else ()

    @property
    def total(self) -> int:
        return self.response.total if self.response is not None else 0

    def selected_record(self) -> Record | None:
        """The selected record if it is on the loaded page, else None."""
        selected = self.selected_id
        if selected is None:
            return None
        return next((r for r in self.data if r.id == selected), None)

    # --- loading ---

    @property
    def needs_sync(self) -> bool:
        return self._reload is not None

    async def _load(self, params: QueryParams) -> FetchResponse:
        self.loading = True
        try:
            response = await fetch_records(self._records, params, self.fetch_delay)
        except Exception:
            log.exception("fetch failed for %s", params)
            raise
        finally:
            self.loading = False
        self.response = response
        return response

    async def sync(self) -> FetchResponse | None:
        """Run the reload the last parameter change asked for.

        Returns the new response, the current one when nothing was due, or
        None when this debounced reload was superseded by a later edit.
        """
        mode = self._reload
        if mode is None:
            return self.response
        self._reload = None
        params = self.params

        if mode == "immediate":
            self._debouncer.cancel()
            return await self._load(params)

        future = self._debouncer.submit(lambda: self._load(params))
        try:
            # Cancelling the caller must not cancel ``future`` itself
            return await asyncio.shield(future)
        except asyncio.CancelledError:
            if future.cancelled():
                log.debug("debounced reload for %r superseded", params.filter_text)
                return None
            # Caller cancelled: drop the timer, the reload stays due
            self._debouncer.cancel()
            self._request("debounced")
            raise
