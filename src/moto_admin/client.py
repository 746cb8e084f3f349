"""
AsyncMotoAdmin / MotoAdmin — main SDK clients.
"""

import asyncio
from typing import Any, Optional, Sequence

import httpx

from moto_admin.auth import Auth
from moto_admin.catalog import BrandsAPI, CategoriesAPI, ManufacturersAPI, ModelsAPI
from moto_admin.config import Settings, get_settings
from moto_admin.dashboard import DashboardAPI
from moto_admin.engagement import AmbassadorsAPI, FeedbackAPI
from moto_admin.guard import SessionGuard
from moto_admin.models.envelope import ApiResponse
from moto_admin.models.product import Part
from moto_admin.models.user import LoginResult
from moto_admin.orders import OrdersAPI
from moto_admin.partners import PartnersAPI
from moto_admin.products import MerchandiseAPI, PartsAPI, ProductsAPI, create_part_with_catalog
from moto_admin.signals import SignalBus, StorageWatcher
from moto_admin.storage import SessionStore
from moto_admin.transport.http import FileUpload, HttpClient
from moto_admin.users import UsersAPI


class AsyncMotoAdmin:
    """Async admin client (primary)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[SessionStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or SessionStore(self.settings.storage_path)
        self.signals = SignalBus()

        self.http = HttpClient(
            self.store,
            self.signals,
            base_url=self.settings.api_base_url,
            timeout=self.settings.request_timeout,
            transport=transport,
        )
        self.auth = Auth(self.http, self.store)
        self.guard = SessionGuard(self.auth, self.signals)
        self.watcher = StorageWatcher(self.store, self.signals, self.settings.storage_poll_interval)

        self.dashboard = DashboardAPI(self.http)
        self.users = UsersAPI(self.http)
        self.orders = OrdersAPI(self.http)
        self.products = ProductsAPI(self.http)
        self.parts = PartsAPI(self.http)
        self.merchandise = MerchandiseAPI(self.http)
        self.brands = BrandsAPI(self.http)
        self.manufacturers = ManufacturersAPI(self.http)
        self.categories = CategoriesAPI(self.http)
        self.models = ModelsAPI(self.http)
        self.feedback = FeedbackAPI(self.http)
        self.ambassadors = AmbassadorsAPI(self.http)
        self.partners = PartnersAPI(self.http)

    async def create_part(
        self,
        fields: dict[str, Any],
        new_brand: Optional[str] = None,
        new_category: Optional[str] = None,
        images: Sequence[FileUpload] = (),
    ) -> ApiResponse[Part]:
        """Create a part, creating a named brand/category first if needed."""
        return await create_part_with_catalog(
            self.parts, self.brands, self.categories, fields,
            new_brand=new_brand, new_category=new_category, images=images,
        )

    async def close(self) -> None:
        await self.watcher.stop()
        await self.guard.unmount()
        await self.http.close()

    async def __aenter__(self) -> "AsyncMotoAdmin":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class MotoAdmin:
    """Sync wrapper around AsyncMotoAdmin. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._loop = asyncio.new_event_loop()
        self._async = AsyncMotoAdmin(**kwargs)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def client(self) -> AsyncMotoAdmin:
        return self._async

    def login(self, email: str, password: str) -> ApiResponse[LoginResult]:
        return self._run(self._async.auth.login(email, password))

    def logout(self) -> None:
        self._async.auth.logout()

    def is_authenticated(self) -> bool:
        return self._async.auth.is_authenticated()

    def validate_token(self) -> bool:
        return self._run(self._async.auth.validate_token())

    def call(self, coro: Any) -> Any:
        """Run any accessor coroutine, e.g. admin.call(admin.client.orders.list(page=2))."""
        return self._run(coro)

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()
