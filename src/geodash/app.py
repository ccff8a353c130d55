"""GeoDash — Streamlit dashboard with a project table and a synchronized map."""

import asyncio
import html

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from geodash.config import get_settings  # noqa: E402
from geodash.dashboard import Dashboard  # noqa: E402
from geodash.i18n import t  # noqa: E402
from geodash.logs import configure_logging  # noqa: E402
from geodash.models import PAGE_SIZES  # noqa: E402
from geodash.query import total_pages  # noqa: E402
from geodash.renderers.plotly_map import STATUS_COLORS, render_map, selected_id_from_event  # noqa: E402
from geodash.store import get_records  # noqa: E402
from geodash.views.info import info_items  # noqa: E402
from geodash.views.table import (  # noqa: E402
    COLUMNS,
    column_label,
    focus_position,
    footer_text,
    highlight_selected,
    loading_frame,
    nav_disabled,
    page_frame,
    page_label,
    row_id_from_event,
    table_height,
)

_settings = get_settings()


@st.cache_resource
def _init_logging() -> None:
    configure_logging(level=_settings.log_level, json_logs=_settings.log_json)


_init_logging()

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# The first run gets None; the rerun streamlit_js_eval triggers fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🌍",
    layout="wide",
)

# --- Session state initialization ---

if "dashboard" not in st.session_state:
    st.session_state.dashboard = Dashboard(
        get_records(),
        fetch_delay=_settings.fetch_delay,
        debounce_delay=_settings.debounce_delay,
        page_size=_settings.page_size,
    )
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

dashboard: Dashboard = st.session_state.dashboard

# --- Theme CSS (static) ---
_badge_css = "\n".join(
    f"    .status-{status.lower()} {{ background: {color}; }}"
    for status, color in STATUS_COLORS.items()
)
st.markdown(
    f"""
    <style>
    iframe[src*="streamlit_js_eval"] {{ display: none !important; }}
    [data-testid="stMainBlockContainer"] {{ padding-top: 1.5rem !important; }}
    .app-header h1 {{ margin-bottom: 0; }}
    .app-header p {{ color: #667085; margin-top: 0.2rem; }}
    .status-badge {{
        color: #ffffff;
        border-radius: 999px;
        padding: 0.1rem 0.6rem;
        font-size: 0.8rem;
        font-weight: 600;
    }}
{_badge_css}
    .info-label {{ color: #667085; font-size: 0.75rem; text-transform: uppercase; margin: 0; }}
    .info-value {{ font-size: 0.95rem; margin: 0 0 0.6rem 0; }}
    .app-footer {{ color: #98a2b3; text-align: center; font-size: 0.8rem; margin-top: 2rem; }}
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Event handlers (run before the next script pass) ---


def _on_search() -> None:
    dashboard.search(st.session_state.filter_text)


def _on_page_size() -> None:
    dashboard.change_page_size(int(st.session_state.page_size))


def _on_table_select(key: str) -> None:
    record_id = row_id_from_event(st.session_state.get(key), dashboard.data)
    if record_id is not None:
        dashboard.select_row(record_id)


def _on_map_select(key: str) -> None:
    record_id = selected_id_from_event(st.session_state.get(key))
    if record_id is not None:
        dashboard.select_marker(record_id)


params = dashboard.params

# --- Header ---
st.markdown(
    f"<div class='app-header'><h1>🌍 {t('page_title', _lang)}</h1>"
    f"<p>{t('page_subtitle', _lang)}</p></div>",
    unsafe_allow_html=True,
)

table_col, map_col = st.columns([3, 2])

# --- Table section ---
with table_col:
    st.subheader(t("section_table", _lang))

    ctrl1, ctrl2 = st.columns([3, 1])
    with ctrl1:
        st.text_input(
            t("label_search", _lang),
            placeholder=t("search_placeholder", _lang),
            key="filter_text",
            on_change=_on_search,
        )
    with ctrl2:
        st.selectbox(
            t("label_rows_per_page", _lang),
            options=PAGE_SIZES,
            index=PAGE_SIZES.index(params.page_size),
            key="page_size",
            on_change=_on_page_size,
        )

    # Column headers as sort buttons (st.dataframe header clicks are client-side only)
    sort_cols = st.columns(len(COLUMNS))
    for col, (field, key) in zip(sort_cols, COLUMNS):
        with col:
            st.button(
                column_label(params, field, key, _lang),
                key=f"sort_{field}",
                on_click=dashboard.sort,
                args=(field,),
                width="stretch",
            )

    # --- Data refresh: the loading row holds the table slot until the page arrives ---
    table_slot = st.empty()
    if dashboard.needs_sync or dashboard.loading:
        table_slot.dataframe(loading_frame(params, _lang), hide_index=True, width="stretch")
        try:
            asyncio.run(dashboard.sync())
            st.session_state.error_msg = None
        except Exception as e:
            st.session_state.error_msg = t("error_fetch", _lang).format(error=html.escape(str(e)))
    records = dashboard.data
    total = dashboard.total

    if st.session_state.error_msg:
        st.error(st.session_state.error_msg)

    if not records:
        table_slot.info(t("empty", _lang))
    else:
        table_key = f"table_{params.page}_{params.page_size}_{params.sort_key}_{params.sort_order}_{params.filter_text}"
        frame = page_frame(records, params, _lang)
        table_slot.dataframe(
            highlight_selected(frame, dashboard.selected_id),
            key=table_key,
            on_select=lambda: _on_table_select(table_key),
            selection_mode="single-row",
            hide_index=True,
            width="stretch",
            height=table_height(len(records), focus_position(records, dashboard.row_focus)),
        )

    # --- Pagination footer ---
    disabled = nav_disabled(params.page, params.page_size, total)
    last_page = max(1, total_pages(total, params.page_size))
    info_col, b1, b2, label_col, b3, b4 = st.columns([3, 1, 1, 1.5, 1, 1])
    with info_col:
        st.caption(footer_text(params.page, params.page_size, total, _lang))
    with b1:
        st.button(t("btn_first", _lang), key="page_first", disabled=disabled["first"],
                  on_click=dashboard.change_page, args=(1,))
    with b2:
        st.button(t("btn_prev", _lang), key="page_prev", disabled=disabled["prev"],
                  on_click=dashboard.change_page, args=(params.page - 1,))
    with label_col:
        st.caption(page_label(params.page, params.page_size, total, _lang))
    with b3:
        st.button(t("btn_next", _lang), key="page_next", disabled=disabled["next"],
                  on_click=dashboard.change_page, args=(params.page + 1,))
    with b4:
        st.button(t("btn_last", _lang), key="page_last", disabled=disabled["last"],
                  on_click=dashboard.change_page, args=(last_page,))

# --- Map + info section ---
with map_col:
    st.subheader(t("section_map", _lang))
    map_key = f"map_{params.page}_{params.page_size}_{params.sort_key}_{params.sort_order}_{params.filter_text}"
    fig = render_map(records, dashboard.selected_id, _lang, focus=dashboard.map_focus)
    st.plotly_chart(
        fig,
        key=map_key,
        on_select=lambda: _on_map_select(map_key),
        selection_mode="points",
        width="stretch",
        config={"scrollZoom": True, "displayModeBar": False},
    )

    st.subheader(t("section_info", _lang))
    selected = dashboard.selected_record()
    if selected is None:
        st.info(t("info_empty", _lang))
    else:
        st.markdown(f"### {html.escape(selected.name)}")
        st.markdown(
            f"<span class='status-badge status-{selected.status.lower()}'>{selected.status}</span>",
            unsafe_allow_html=True,
        )
        left, right = st.columns(2)
        for i, (label, value) in enumerate(info_items(selected, _lang)):
            with left if i % 2 == 0 else right:
                st.markdown(
                    f"<p class='info-label'>{html.escape(label)}</p>"
                    f"<p class='info-value'>{html.escape(value)}</p>",
                    unsafe_allow_html=True,
                )

st.markdown(f"<div class='app-footer'>{t('footer', _lang)}</div>", unsafe_allow_html=True)
