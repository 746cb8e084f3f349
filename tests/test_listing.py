"""Listing: page/filter state and stale response handling."""

import asyncio

import pytest

from moto_admin.listing import Listing
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page, Pagination
from moto_admin.table import Column


def page_response(page: int, limit: int = 20, total: int = 100) -> ApiResponse:
    return ApiResponse.success(Page(items=[f"item-{page}"], pagination=Pagination(page=page, limit=limit, total=total)))


class RecordingFetch:
    def __init__(self):
        self.calls = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        return page_response(kwargs["page"], kwargs["limit"])


class GatedFetch:
    """Each page's response waits until the test releases it."""

    def __init__(self):
        self.gates: dict[int, asyncio.Event] = {}

    async def __call__(self, page, limit, **_):
        gate = self.gates.setdefault(page, asyncio.Event())
        await gate.wait()
        return page_response(page, limit)


class TestListing:
    @pytest.mark.asyncio
    async def test_load_passes_page_limit_and_filters(self):
        fetch = RecordingFetch()
        listing = Listing(fetch, page_size=10, status="shipped", user_id=None)

        assert await listing.load() is True

        assert fetch.calls == [{"page": 1, "limit": 10, "status": "shipped"}]
        assert listing.items == ["item-1"]
        assert listing.pagination.pages == 10
        assert listing.error is None
        assert listing.loading is False

    @pytest.mark.asyncio
    async def test_error_clears_items(self):
        async def failing(**_):
            return ApiResponse.failure("Request failed", status=500)

        listing = Listing(failing)
        await listing.load()
        assert listing.items == []
        assert listing.pagination is None
        assert listing.error == "Request failed"

    @pytest.mark.asyncio
    async def test_filters_reset_to_first_page(self):
        fetch = RecordingFetch()
        listing = Listing(fetch)
        await listing.set_page(4)
        await listing.set_filters(status="cancelled", payment_status=None)

        assert listing.page == 1
        assert fetch.calls[-1] == {"page": 1, "limit": 20, "status": "cancelled"}

    @pytest.mark.asyncio
    async def test_stale_response_is_discarded(self):
        fetch = GatedFetch()
        listing = Listing(fetch)

        slow = asyncio.create_task(listing.set_page(2))
        await asyncio.sleep(0)
        fast = asyncio.create_task(listing.set_page(3))
        await asyncio.sleep(0)

        fetch.gates[3].set()
        assert await fast is True
        fetch.gates[2].set()
        assert await slow is False

        assert listing.items == ["item-3"]
        assert listing.pagination.page == 3

    @pytest.mark.asyncio
    async def test_response_after_close_is_discarded(self):
        fetch = GatedFetch()
        listing = Listing(fetch)

        loading = asyncio.create_task(listing.load())
        await asyncio.sleep(0)
        listing.close()
        fetch.gates[1].set()

        assert await loading is False
        assert listing.items == []
        assert not listing.active
        assert listing.loading is False

    @pytest.mark.asyncio
    async def test_table_controls_drive_the_listing(self):
        fetch = RecordingFetch()
        listing = Listing(fetch)
        await listing.load()

        table = listing.table([Column("name", "Name")])
        assert table.controls.next() is True
        await listing.settle()

        assert listing.page == 2
        assert listing.items == ["item-2"]
        assert fetch.calls[-1]["page"] == 2
