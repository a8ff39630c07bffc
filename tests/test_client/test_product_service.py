"""Tests for the inventory API HTTP client."""

import httpx
import pytest
from structlog.testing import capture_logs

from inventory.client.product_service import ProductServiceClient
from inventory.schemas.product import ProductRead, ProductStats

PRODUCTS = [
    {"id": 1, "name": "Producto 1", "type": "Handmade", "status": "Available"},
    {"id": 2, "name": "Producto 2", "type": "Machine-made", "status": "Defective"},
]


def api_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/products":
        return httpx.Response(200, json=PRODUCTS)
    if request.url.path == "/products/stats":
        return httpx.Response(200, json={"Total": 2, "Defective": 1, "Available": 1})
    return httpx.Response(404, json={"detail": "Not Found"})


class TestProductServiceClient:
    """Tests for ProductServiceClient."""

    @pytest.fixture
    def client(self) -> ProductServiceClient:
        return ProductServiceClient(
            base_url="http://inventory-api:8080",
            timeout=5.0,
            transport=httpx.MockTransport(api_handler),
        )

    @pytest.mark.asyncio
    async def test_get_products(self, client: ProductServiceClient):
        products = await client.get_products()
        await client.close()

        assert products == [ProductRead(**p) for p in PRODUCTS]

    @pytest.mark.asyncio
    async def test_get_stats(self, client: ProductServiceClient):
        stats = await client.get_stats()
        await client.close()

        assert stats == ProductStats(Total=2, Defective=1, Available=1)

    @pytest.mark.asyncio
    async def test_http_error_propagates(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
        async with ProductServiceClient(base_url="http://x", transport=transport) as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await client.get_stats()

        assert exc_info.value.response.status_code == 500

    @pytest.mark.asyncio
    async def test_get_stats_tolerates_new_keys(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"Total": 3, "Defective": 1, "Available": 2, "Reserved": 0}
            )
        )
        async with ProductServiceClient(base_url="http://x", transport=transport) as client:
            stats = await client.get_stats()

        assert stats == ProductStats(Total=3, Defective=1, Available=2)

    @pytest.mark.asyncio
    async def test_error_log_carries_base_url(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="down"))
        with capture_logs() as logs:
            async with ProductServiceClient(base_url="http://inventory-api:8080", transport=transport) as client:
                with pytest.raises(httpx.HTTPStatusError):
                    await client.get_products()

        errors = [entry for entry in logs if entry["log_level"] == "error"]
        assert errors
        assert errors[0]["base_url"] == "http://inventory-api:8080"
        assert errors[0]["status_code"] == 503

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with ProductServiceClient(base_url="http://x", transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get_products()

    @pytest.mark.asyncio
    async def test_close_resets_client(self, client: ProductServiceClient):
        await client.get_stats()
        assert client._client is not None

        await client.close()
        assert client._client is None

    def test_defaults_from_settings(self):
        client = ProductServiceClient()
        assert client.base_url == "http://localhost:8080"
        assert client.timeout == 10.0
