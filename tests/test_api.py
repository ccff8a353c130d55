import time

import pytest

from geodash.api import fetch_records
from geodash.models import QueryParams


@pytest.mark.asyncio
async def test_fetch_wraps_the_query_result(small_records):
    params = QueryParams(filter_text="solar", sort_key="latitude", sort_order="desc", page_size=10)
    response = await fetch_records(small_records, params, delay=0)
    assert [r.id for r in response.data] == ["project-4", "project-1"]
    assert response.total == 2
    assert (response.page, response.page_size) == (1, 10)


@pytest.mark.asyncio
async def test_fetch_waits_for_the_simulated_latency(small_records):
    start = time.perf_counter()
    await fetch_records(small_records, QueryParams(), delay=0.05)
    assert time.perf_counter() - start >= 0.045
