from geodash.models import MapFocus, RowFocus, Selected, Unselected
from geodash.selection import SelectionSync


def _sync(records):
    by_id = {r.id: r for r in records}
    return SelectionSync(by_id.get)


def test_starts_unselected(small_records):
    sync = _sync(small_records)
    assert sync.state == Unselected()
    assert sync.selected_id is None


def test_selecting_b_after_a_leaves_only_b(small_records):
    sync = _sync(small_records)
    sync.select_row("project-1")
    sync.select_marker("project-2")
    assert sync.state == Selected("project-2")
    assert sync.is_selected("project-2")
    assert not sync.is_selected("project-1")


def test_row_click_recenters_the_map(small_records):
    sync = _sync(small_records)
    map_events: list[MapFocus] = []
    table_events: list[RowFocus] = []
    sync.on_map_focus(map_events.append)
    sync.on_table_focus(table_events.append)

    sync.select_row("project-3")

    assert map_events == [MapFocus(record_id="project-3", latitude=10.5, longitude=-60.25)]
    assert map_events[0].zoom == 10
    assert map_events[0].open_popup
    assert table_events == []


def test_marker_click_focuses_the_row(small_records):
    sync = _sync(small_records)
    map_events: list[MapFocus] = []
    table_events: list[RowFocus] = []
    sync.on_map_focus(map_events.append)
    sync.on_table_focus(table_events.append)

    sync.select_marker("project-4")

    assert table_events == [RowFocus(record_id="project-4")]
    assert map_events == []


def test_unknown_id_leaves_selection_alone(small_records):
    sync = _sync(small_records)
    events: list[MapFocus] = []
    sync.on_map_focus(events.append)
    sync.select_row("project-1")

    sync.select_row("project-404")

    assert sync.state == Selected("project-1")
    assert len(events) == 1


def test_clear(small_records):
    sync = _sync(small_records)
    sync.select_row("project-1")
    assert sync.clear() == Unselected()
    assert sync.selected_id is None
