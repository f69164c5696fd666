"""Tests for day-token resolution."""

from datetime import date

import httpx
import pytest

from fairplay_courts.client import FairPlayClient
from fairplay_courts.models import DayNotFoundError, FetchError
from fairplay_courts.resolver import DayTokenResolver, resolve_day_token

from helpers import ORIGIN, board_page, day_bar, vendor_client

FRIDAY_12 = date(2025, 9, 12)

WEEK_1 = [("Lu 1", "D1"), ("Ma 2", "D2"), ("Me 3", "D3"), ("Je 4", "D4"), ("Ve 5", "D5")]
WEEK_2 = [("Lu 8", "D8"), ("Ma 9", "D9"), ("Me 10", "D10"), ("Je 11", "D11"), ("Ve 12", "ABC123")]


class TestDayTokenResolver:
    """Test cases for DayTokenResolver."""

    @pytest.mark.asyncio
    async def test_found_on_first_page(self):
        calls: list[httpx.Request] = []
        client = vendor_client({None: board_page([], [], bar=day_bar(WEEK_2))}, calls)

        token = await DayTokenResolver(client).resolve(FRIDAY_12, "ext")

        assert token == "ABC123"
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_follows_trailing_link(self):
        calls: list[httpx.Request] = []
        pages = {
            None: board_page([], [], bar=day_bar(WEEK_1, next_token="PAGE2")),
            "PAGE2": board_page([], [], bar=day_bar(WEEK_2)),
        }

        token = await resolve_day_token(FRIDAY_12, "ext", client=vendor_client(pages, calls))

        assert token == "ABC123"
        assert [r.url.params.get("d") for r in calls] == [None, "PAGE2"]

    @pytest.mark.asyncio
    async def test_hop_bound(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            n = len(calls)
            bar = day_bar([(f"Lu {n}", f"T{n}")], next_token=f"N{n}")
            return httpx.Response(200, text=board_page([], [], bar=bar))

        client = FairPlayClient(base_url=ORIGIN, transport=httpx.MockTransport(handler))

        with pytest.raises(DayNotFoundError) as exc:
            await DayTokenResolver(client).resolve(FRIDAY_12, "int", max_hops=4)

        assert len(calls) == 4
        assert exc.value.hops == 4
        assert exc.value.exhausted is False
        assert exc.value.wanted == "Ve 12"
        assert exc.value.labels_seen == ["Lu 1", ">>", "Lu 2", ">>", "Lu 3", ">>", "Lu 4", ">>"]
        assert "Lu 3" in exc.value.message

    @pytest.mark.asyncio
    async def test_exhausted_without_trailing_link(self):
        calls: list[httpx.Request] = []
        client = vendor_client({None: board_page([], [], bar="<p>no day bar</p>")}, calls)

        with pytest.raises(DayNotFoundError) as exc:
            await DayTokenResolver(client).resolve(FRIDAY_12, "ext", max_hops=10)

        assert exc.value.exhausted is True
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_fetch_error_surfaces(self):
        pages = {None: board_page([], [], bar=day_bar(WEEK_1, next_token="MISSING"))}

        with pytest.raises(FetchError) as exc:
            await DayTokenResolver(vendor_client(pages)).resolve(FRIDAY_12, "ext")

        assert exc.value.status == 404
        assert "hop 2" in exc.value.message
