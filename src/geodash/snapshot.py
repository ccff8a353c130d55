"""CLI entry point for a static PNG of one query's markers.

Edit the query variables at the top, then run:
    uv run python -m geodash.snapshot
"""

from dotenv import load_dotenv

load_dotenv()

from geodash.config import get_settings  # noqa: E402
from geodash.logs import configure_logging  # noqa: E402
from geodash.models import QueryParams  # noqa: E402
from geodash.query import run_query  # noqa: E402
from geodash.renderers.static import save_static_map  # noqa: E402
from geodash.store import get_records  # noqa: E402

filter_text = "Solar"
sort_key = "latitude"
sort_order = "asc"
page = 1
page_size = 100

settings = get_settings()
configure_logging(level=settings.log_level, json_logs=settings.log_json)

params = QueryParams(
    filter_text=filter_text,
    sort_key=sort_key,
    sort_order=sort_order,
    page=page,
    page_size=page_size,
)
result = run_query(get_records(), params)
path = save_static_map(result.items, title=f"{filter_text} page {page}")
print(f"{len(result.items)} of {result.total_matched} matches. Saved: {path}")
