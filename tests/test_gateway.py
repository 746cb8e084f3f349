"""Request gateway: headers, bodies, error envelopes and session invalidation."""

import httpx
import pytest
import pytest_asyncio

from conftest import BASE_URL, body_json
from moto_admin.signals import AUTH_INVALID_TOKEN
from moto_admin.transport.http import (
    ENCODING_ERROR,
    NETWORK_ERROR,
    FileUpload,
    HttpClient,
    MultipartBody,
    build_headers,
    clean_params,
    error_message,
)


@pytest_asyncio.fixture
async def http(store, signals, api):
    client = HttpClient(store, signals, base_url=BASE_URL, transport=httpx.MockTransport(api.handler))
    yield client
    await client.close()


@pytest.fixture
def invalidations(signals):
    seen = []
    signals.subscribe(AUTH_INVALID_TOKEN, lambda **payload: seen.append(payload))
    return seen


def logo() -> FileUpload:
    return FileUpload(field="logo", filename="logo.png", content=b"\x89PNG", content_type="image/png")


class TestHeaders:
    def test_json_body_gets_json_content_type(self):
        headers = build_headers("tok", {"name": "x"})
        assert headers["Content-Type"] == "application/json"
        assert headers["Authorization"] == "Bearer tok"

    def test_multipart_body_leaves_content_type_to_transport(self):
        headers = build_headers("tok", MultipartBody(fields={"name": "x"}))
        assert "Content-Type" not in headers

    def test_no_token_no_authorization(self):
        assert "Authorization" not in build_headers(None, None)

    def test_caller_headers_win(self):
        headers = build_headers("tok", None, {"Authorization": "Bearer other", "X-Trace": "1"})
        assert headers["Authorization"] == "Bearer other"
        assert headers["X-Trace"] == "1"

    def test_clean_params_drops_unset_values(self):
        assert clean_params({"page": 2, "status": None, "search": "", "email_verified": True}) == {
            "page": "2",
            "email_verified": "true",
        }
        assert clean_params(None) is None

    def test_error_message_prefers_error_then_message(self):
        assert error_message({"error": "Bad", "message": "ignored"}) == "Bad"
        assert error_message({"message": "Only message"}) == "Only message"
        assert error_message({}) == "Request failed"
        assert error_message("plain text") == "Request failed"


class TestRequests:
    @pytest.mark.asyncio
    async def test_json_request_carries_token_and_body(self, http, store, api):
        store.save("tok-1")
        api.on("POST", "/admin/merchandise", 201, {"merchandise": {"id": 9}})

        resp = await http.post("/admin/merchandise", {"name": "Tee", "price": 25})

        assert resp.ok
        assert resp.status == 201
        assert resp.data == {"merchandise": {"id": 9}}
        request = api.requests[0]
        assert request.headers["content-type"] == "application/json"
        assert request.headers["authorization"] == "Bearer tok-1"
        assert body_json(request) == {"name": "Tee", "price": 25}

    @pytest.mark.asyncio
    async def test_no_authorization_header_without_token(self, http, api):
        api.on("GET", "/products/brands", 200, {"brands": []})
        await http.get("/products/brands")
        assert "authorization" not in api.requests[0].headers

    @pytest.mark.asyncio
    async def test_multipart_request_has_boundary_content_type(self, http, store, api):
        store.save("tok")
        api.on("PUT", "/admin/brands/3", 200, {"message": "updated"})

        body = MultipartBody(fields={"name": "Brembo", "featured": True, "skip": None}, files=[logo()])
        resp = await http.put("/admin/brands/3", body)

        assert resp.ok
        request = api.requests[0]
        assert request.headers["content-type"].startswith("multipart/form-data; boundary=")
        assert b'name="name"' in request.content
        assert b"Brembo" in request.content
        assert b"true" in request.content
        assert b'filename="logo.png"' in request.content
        assert b'name="skip"' not in request.content

    @pytest.mark.asyncio
    async def test_multipart_without_files_stays_multipart(self, http, api):
        api.on("POST", "/admin/partners", 201, {"partner": {"id": 1}})
        await http.post("/admin/partners", MultipartBody(fields={"name": "Shop"}))
        assert api.requests[0].headers["content-type"].startswith("multipart/form-data")

    @pytest.mark.asyncio
    async def test_list_values_repeat_in_forms(self, http, api):
        api.on("POST", "/admin/parts", 201, {"part": {"id": 1}})
        await http.post("/admin/parts", MultipartBody(fields={"color_options": ["red", "black"]}, files=[logo()]))
        assert api.requests[0].content.count(b'name="color_options"') == 2

    @pytest.mark.asyncio
    async def test_query_params(self, http, api):
        api.on("GET", "/admin/orders", 200, {"orders": []})
        await http.get("/admin/orders", params={"page": 3, "status": None, "limit": 20})
        assert dict(api.requests[0].url.params) == {"page": "3", "limit": "20"}


class TestErrors:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [401, 403])
    async def test_session_status_clears_token_and_signals_once(self, http, store, api, invalidations, status):
        store.save("tok", {"email": "a@b.c"})
        api.on("GET", "/admin/orders", status, {"error": "Invalid or expired token"})

        resp = await http.get("/admin/orders")

        assert resp.error == "Invalid or expired token"
        assert resp.status == status
        assert store.token is None
        assert store.user is None
        assert invalidations == [{"status": status}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500])
    async def test_other_errors_keep_session(self, http, store, api, invalidations, status):
        store.save("tok")
        api.on("GET", "/admin/orders/7", status, {"message": "Order not found"})

        resp = await http.get("/admin/orders/7")

        assert resp.error == "Order not found"
        assert resp.status == status
        assert store.token == "tok"
        assert invalidations == []

    @pytest.mark.asyncio
    async def test_error_without_message_uses_generic_text(self, http, api):
        api.on("DELETE", "/admin/parts/1", 500, content=b"<html>oops</html>")
        resp = await http.delete("/admin/parts/1")
        assert resp.error == "Request failed"

    @pytest.mark.asyncio
    async def test_unauthenticated_call_never_invalidates(self, http, store, api, invalidations):
        store.save("tok")
        api.on("POST", "/auth/login-admin", 401, {"error": "Invalid credentials"})

        resp = await http.post("/auth/login-admin", {"email": "a", "password": "b"}, authenticated=False)

        assert resp.error == "Invalid credentials"
        assert store.token == "tok"
        assert invalidations == []

    @pytest.mark.asyncio
    async def test_network_error_keeps_session(self, http, store, api, invalidations):
        store.save("tok")

        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        api.route("GET", "/admin/dashboard", refuse)
        resp = await http.get("/admin/dashboard")

        assert resp.error == NETWORK_ERROR
        assert resp.status is None
        assert store.token == "tok"
        assert invalidations == []

    @pytest.mark.asyncio
    async def test_unparseable_success_is_an_error(self, http, api):
        api.on("GET", "/admin/dashboard", 200, content=b"<!doctype html>")
        resp = await http.get("/admin/dashboard")
        assert resp.error == "Unexpected response from server"
        assert resp.status == 200

    @pytest.mark.asyncio
    async def test_empty_success_body_is_empty_object(self, http, api):
        api.on("DELETE", "/admin/brands/2", 204, content=b"")
        resp = await http.delete("/admin/brands/2")
        assert resp.ok
        assert resp.data == {}

    @pytest.mark.asyncio
    async def test_null_success_body_is_empty_object(self, http, api):
        api.on("POST", "/admin/orders/7/status", 200, content=b"null")
        resp = await http.post("/admin/orders/7/status", {"status": "shipped"})
        assert resp.ok
        assert resp.data == {}

    @pytest.mark.asyncio
    async def test_unencodable_body_is_an_error_without_request(self, http, api):
        resp = await http.post("/admin/brands", {"name": "Acme", "founded": object()})
        assert resp.error == ENCODING_ERROR
        assert resp.status is None
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_unencodable_form_field_is_an_error_without_request(self, http, api):
        body = MultipartBody(fields={"specs": {"weight": object()}}, files=[logo()])
        resp = await http.post("/admin/parts", body)
        assert resp.error == ENCODING_ERROR
        assert api.requests == []
