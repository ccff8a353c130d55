"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "지리 데이터 대시보드",
        "en": "Geo Data Dashboard",
    },
    "page_subtitle": {
        "ko": "인터랙티브 지도와 필터로 공간 데이터를 살펴보세요",
        "en": "Explore spatial data with interactive maps and advanced filtering",
    },
    "section_table": {
        "ko": "프로젝트 목록",
        "en": "Projects Database",
    },
    "section_map": {
        "ko": "지도",
        "en": "Geographic View",
    },
    "section_info": {
        "ko": "프로젝트 정보",
        "en": "Project Information",
    },
    "search_placeholder": {
        "ko": "이름, 상태, ID로 검색...",
        "en": "Search by name, status, or ID...",
    },
    "label_search": {
        "ko": "검색",
        "en": "Search",
    },
    "label_rows_per_page": {
        "ko": "페이지당 행 수",
        "en": "Rows per page",
    },
    "label_sort": {
        "ko": "정렬",
        "en": "Sort by",
    },
    "col_name": {
        "ko": "프로젝트 이름",
        "en": "Project Name",
    },
    "col_latitude": {
        "ko": "위도",
        "en": "Latitude",
    },
    "col_longitude": {
        "ko": "경도",
        "en": "Longitude",
    },
    "col_status": {
        "ko": "상태",
        "en": "Status",
    },
    "col_last_updated": {
        "ko": "최종 수정일",
        "en": "Last Updated",
    },
    "col_id": {
        "ko": "프로젝트 ID",
        "en": "Project ID",
    },
    "col_coordinates": {
        "ko": "전체 좌표",
        "en": "Full Coordinates",
    },
    "loading": {
        "ko": "불러오는 중...",
        "en": "Loading...",
    },
    "empty": {
        "ko": "데이터가 없습니다",
        "en": "No data available",
    },
    "showing": {
        "ko": "전체 {total}건 중 {first}-{last}",
        "en": "Showing {first} to {last} of {total} results",
    },
    "no_results": {
        "ko": "결과 없음",
        "en": "No results",
    },
    "page_of": {
        "ko": "{page} / {pages} 페이지",
        "en": "Page {page} of {pages}",
    },
    "btn_first": {
        "ko": "처음",
        "en": "First",
    },
    "btn_prev": {
        "ko": "이전",
        "en": "Previous",
    },
    "btn_next": {
        "ko": "다음",
        "en": "Next",
    },
    "btn_last": {
        "ko": "마지막",
        "en": "Last",
    },
    "info_empty": {
        "ko": "프로젝트를 선택하면 상세 정보가 표시됩니다",
        "en": "Select a project to view details",
    },
    "popup_status": {
        "ko": "상태",
        "en": "Status",
    },
    "error_fetch": {
        "ko": "데이터를 불러오지 못했어요. ({error})",
        "en": "Failed to load data. ({error})",
    },
    "footer": {
        "ko": "Geo Data Dashboard © 2026 | Streamlit + Plotly",
        "en": "Geo Data Dashboard © 2026 | Built with Streamlit + Plotly",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
