"""In-process stand-in for the projects endpoint, with artificial latency."""

import asyncio
from collections.abc import Iterable

from geodash.logs import get_logger
from geodash.models import FetchResponse, QueryParams, Record
from geodash.query import run_query

log = get_logger(__name__)

DEFAULT_DELAY = 0.3


async def fetch_records(
    records: Iterable[Record],
    params: QueryParams,
    delay: float = DEFAULT_DELAY,
) -> FetchResponse:
    """Wait ``delay`` seconds, then answer ``params`` from ``records``.

    Args:
        records: Record snapshot to query.
        params: Filter/sort/page parameters.
        delay: Simulated round-trip time in seconds.

    Returns:
        FetchResponse with the requested page and the total match count.
    """
    await asyncio.sleep(delay)
    result = run_query(records, params)
    log.debug(
        "fetch filter=%r sort=%s/%s page=%d size=%d -> %d of %d",
        params.filter_text,
        params.sort_key,
        params.sort_order,
        params.page,
        params.page_size,
        len(result.items),
        result.total_matched,
    )
    return FetchResponse(
        data=result.items,
        total=result.total_matched,
        page=params.page,
        page_size=params.page_size,
    )
