"""Plotly interactive map renderer.

One marker per visible record on OpenStreetMap tiles. The selected record
gets a larger, recoloured marker with its name shown next to it, and the
camera centres on it; otherwise the camera fits all visible markers.
"""

import html
import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import plotly.graph_objects as go

from geodash.i18n import t
from geodash.models import MapFocus, MapView, Record

STATUS_COLORS: dict[str, str] = {
    "Active": "#2e7d32",
    "Inactive": "#757575",
    "Completed": "#1565c0",
    "Pending": "#ef6c00",
}
_SELECTED_COLOR = "#d81b60"
_MARKER_SIZE = 10
_SELECTED_SIZE = 18

WORLD_VIEW = MapView(center_lat=20.0, center_lng=0.0, zoom=2)
SELECTED_ZOOM = 10
MAX_FIT_ZOOM = 12

# Reference viewport used to turn a bounding box into a zoom level
_VIEW_WIDTH_PX = 800
_VIEW_HEIGHT_PX = 500
_TILE_PX = 256
_MAX_MERCATOR_LAT = 85.0511


def _mercator_y(lat: float) -> float:
    lat = max(-_MAX_MERCATOR_LAT, min(_MAX_MERCATOR_LAT, lat))
    return math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))


def fit_bounds(
    records: Sequence[Record], padding: float = 0.1, max_zoom: float = MAX_FIT_ZOOM
) -> MapView:
    """Camera that shows every record, padded by ``padding`` of the span on each side.

    Args:
        records: Markers to frame. Empty = world view.
        padding: Fraction of the bounding box added on every side.
        max_zoom: Upper bound so a single marker does not zoom to street level.

    Returns:
        MapView centred on the padded bounding box.
    """
    if not records:
        return WORLD_VIEW

    lats = np.array([r.latitude for r in records])
    lngs = np.array([r.longitude for r in records])
    lat_min, lat_max = float(lats.min()), float(lats.max())
    lng_min, lng_max = float(lngs.min()), float(lngs.max())

    lat_pad = (lat_max - lat_min) * padding
    lng_pad = (lng_max - lng_min) * padding
    lat_min, lat_max = max(lat_min - lat_pad, -90.0), min(lat_max + lat_pad, 90.0)
    lng_min, lng_max = max(lng_min - lng_pad, -180.0), min(lng_max + lng_pad, 180.0)

    lng_span = lng_max - lng_min
    y_span = _mercator_y(lat_max) - _mercator_y(lat_min)
    zooms = [max_zoom]
    if lng_span > 0:
        zooms.append(math.log2(_VIEW_WIDTH_PX / _TILE_PX * 360.0 / lng_span))
    if y_span > 0:
        zooms.append(math.log2(_VIEW_HEIGHT_PX / _TILE_PX * 2 * math.pi / y_span))

    return MapView(
        center_lat=(lat_min + lat_max) / 2,
        center_lng=(lng_min + lng_max) / 2,
        zoom=max(0.0, min(zooms)),
    )


def map_view(
    records: Sequence[Record],
    selected_id: str | None,
    focus: MapFocus | None = None,
) -> MapView:
    """Centre on the selected record when it is visible, else fit all markers.

    A ``focus`` for the selected record (sent when its table row was clicked)
    supplies the zoom level.
    """
    selected = next((r for r in records if r.id == selected_id), None)
    if selected is not None:
        zoom = focus.zoom if focus is not None and focus.record_id == selected.id else SELECTED_ZOOM
        return MapView(
            center_lat=selected.latitude,
            center_lng=selected.longitude,
            zoom=zoom,
        )
    return fit_bounds(records)


def _hover_text(record: Record, lang: str) -> str:
    return f"<b>{html.escape(record.name)}</b><br>{t('popup_status', lang)}: {record.status}"


def render_map(
    records: Sequence[Record],
    selected_id: str | None = None,
    lang: str = "en",
    focus: MapFocus | None = None,
) -> go.Figure:
    """Render the visible page of records as a Plotly map.

    Args:
        records: Records on the current table page.
        selected_id: Currently selected record id, if any.
        lang: UI language for hover labels.
        focus: Last recenter request from the table, if any.

    Returns:
        Plotly Figure with two traces: ``projects`` and ``selected``. Every
        point carries its record id in ``customdata``.
    """
    others = [r for r in records if r.id != selected_id]
    chosen = [r for r in records if r.id == selected_id]

    base_trace = go.Scattermap(
        lat=[r.latitude for r in others],
        lon=[r.longitude for r in others],
        customdata=[r.id for r in others],
        hovertext=[_hover_text(r, lang) for r in others],
        hoverinfo="text",
        mode="markers",
        marker=dict(
            size=_MARKER_SIZE,
            color=[STATUS_COLORS.get(r.status, "#455a64") for r in others],
            opacity=0.85,
        ),
        name="projects",
    )

    # Selected marker: enlarged, with its name shown as the popup
    selected_trace = go.Scattermap(
        lat=[r.latitude for r in chosen],
        lon=[r.longitude for r in chosen],
        customdata=[r.id for r in chosen],
        hovertext=[_hover_text(r, lang) for r in chosen],
        hoverinfo="text",
        text=[r.name for r in chosen],
        textposition="top right",
        mode="markers+text",
        marker=dict(size=_SELECTED_SIZE, color=_SELECTED_COLOR, opacity=1.0),
        name="selected",
    )

    view = map_view(records, selected_id, focus)
    fig = go.Figure(data=[base_trace, selected_trace])
    fig.update_layout(
        map=dict(
            style="open-street-map",
            center=dict(lat=view.center_lat, lon=view.center_lng),
            zoom=view.zoom,
        ),
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=_VIEW_HEIGHT_PX,
        clickmode="event+select",
        # New uirevision per selection or page so the camera jumps to the new target
        uirevision=f"{selected_id}|{records[0].id if records else ''}|{len(records)}",
    )
    return fig


def selected_id_from_event(event: Mapping[str, Any] | None) -> str | None:
    """Record id of the clicked marker in a ``st.plotly_chart`` selection event."""
    if not event:
        return None
    points = (event.get("selection") or {}).get("points") or []
    for point in points:
        customdata = point.get("customdata")
        if isinstance(customdata, (list, tuple)):
            customdata = customdata[0] if customdata else None
        if customdata:
            return str(customdata)
    return None
