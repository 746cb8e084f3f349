"""
Listing — the fetch side of a paginated page.

Holds the current page and filters, calls an accessor, and keeps only the
newest response: each load takes a generation number and a response whose
generation is no longer current (or that arrives after close()) is dropped.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, Sequence

from moto_admin.logging_utils import get_logger
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.pagination import Page, Pagination
from moto_admin.table import Column, DataTable

Fetch = Callable[..., Awaitable[ApiResponse[Page[Any]]]]

logger = get_logger(__name__)


class Listing:
    def __init__(self, fetch: Fetch, page_size: int = 20, **filters: Any):
        self._fetch = fetch
        self.page = 1
        self.page_size = page_size
        self.filters = {k: v for k, v in filters.items() if v is not None}
        self.items: list[Any] = []
        self.pagination: Optional[Pagination] = None
        self.error: Optional[str] = None
        self.loading = False
        self._generation = 0
        self._active = True
        self._tasks: set[asyncio.Task[bool]] = set()

    @property
    def active(self) -> bool:
        return self._active

    async def load(self) -> bool:
        """Fetch the current page. Returns False if the response was stale."""
        self._generation += 1
        generation = self._generation
        self.loading = True
        resp = await self._fetch(page=self.page, limit=self.page_size, **self.filters)
        if not self._active:
            self.loading = False
            logger.debug("listing_closed_response_discarded", page=self.page, generation=generation)
            return False
        # A newer load owns `loading` now.
        if generation != self._generation:
            logger.debug("listing_stale_response_discarded", page=self.page, generation=generation)
            return False
        self.loading = False
        if resp.ok and resp.data is not None:
            self.items = list(resp.data.items)
            self.pagination = resp.data.pagination
            self.error = None
        else:
            self.items = []
            self.pagination = None
            self.error = resp.error
        return True

    async def set_page(self, page: int) -> bool:
        self.page = max(1, page)
        return await self.load()

    async def set_filters(self, **filters: Any) -> bool:
        self.filters = {k: v for k, v in filters.items() if v is not None}
        self.page = 1
        return await self.load()

    def request_page(self, page: int) -> "asyncio.Task[bool]":
        """Page-change callback for DataTable: schedules set_page on the running loop."""
        task = asyncio.get_running_loop().create_task(self.set_page(page))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def settle(self) -> None:
        """Wait for page changes requested through the table."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks))

    def table(self, columns: Sequence[Column], **kwargs: Any) -> DataTable:
        return DataTable(
            columns,
            self.items,
            pagination=self.pagination,
            on_page_change=self.request_page,
            **kwargs,
        )

    def close(self) -> None:
        self._active = False
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
