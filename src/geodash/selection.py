"""Shared selection state for the table and the map.

One value, ``Unselected()`` or ``Selected(record_id)``, is the only source
of truth. Row clicks and marker clicks both write it; each trigger then
tells the *other* view what to do (recenter the map, or highlight the row).
"""

from collections.abc import Callable

from geodash.logs import get_logger
from geodash.models import MapFocus, Record, RowFocus, Selected, Selection, Unselected

log = get_logger(__name__)

MapListener = Callable[[MapFocus], None]
TableListener = Callable[[RowFocus], None]


class SelectionSync:
    def __init__(self, lookup: Callable[[str], Record | None]) -> None:
        self._lookup = lookup
        self._state: Selection = Unselected()
        self._map_listeners: list[MapListener] = []
        self._table_listeners: list[TableListener] = []

    @property
    def state(self) -> Selection:
        return self._state

    @property
    def selected_id(self) -> str | None:
        return self._state.record_id if isinstance(self._state, Selected) else None

    def is_selected(self, record_id: str) -> bool:
        return self.selected_id == record_id

    def on_map_focus(self, listener: MapListener) -> MapListener:
        self._map_listeners.append(listener)
        return listener

    def on_table_focus(self, listener: TableListener) -> TableListener:
        self._table_listeners.append(listener)
        return listener

    def _select(self, record_id: str, source: str) -> Record | None:
        record = self._lookup(record_id)
        if record is None:
            log.debug("ignoring %s selection of unknown id %s", source, record_id)
            return None
        previous = self.selected_id
        self._state = Selected(record_id)
        log.debug("selection %s -> %s via %s", previous, record_id, source)
        return record

    def select_row(self, record_id: str) -> Selection:
        """Row click: select the record and recenter the map on it."""
        record = self._select(record_id, "row")
        if record is not None:
            focus = MapFocus(
                record_id=record.id,
                latitude=record.latitude,
                longitude=record.longitude,
            )
            for listener in self._map_listeners:
                listener(focus)
        return self._state

    def select_marker(self, record_id: str) -> Selection:
        """Marker click: select the record and bring its row into view."""
        record = self._select(record_id, "marker")
        if record is not None:
            focus = RowFocus(record_id=record.id)
            for listener in self._table_listeners:
                listener(focus)
        return self._state

    def clear(self) -> Selection:
        self._state = Unselected()
        return self._state
