"""Product Service Client - HTTP client for the inventory API.

Used by the dashboard and product list views to read products and stats.
"""

from types import TracebackType

import httpx

from inventory.config import settings
from inventory.infra.logging import get_logger
from inventory.schemas.product import ProductRead, ProductStats


class ProductServiceClient:
    """HTTP client for the two read endpoints of the inventory API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize product service client.

        Args:
            base_url: API base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
            transport: Optional httpx transport, e.g. for tests
        """
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.client_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self.logger = get_logger(__name__, base_url=self.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ProductServiceClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _get_json(self, path: str):
        client = await self._get_client()
        try:
            response = await client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(
                "Inventory API returned error",
                path=path,
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            raise
        except httpx.HTTPError as e:
            self.logger.error("Inventory API request failed", path=path, error=str(e))
            raise

        self.logger.debug("Inventory API response", path=path, status_code=response.status_code)
        return response.json()

    async def get_products(self) -> list[ProductRead]:
        """Fetch every product.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response
        """
        data = await self._get_json("/products")
        return [ProductRead.model_validate(item) for item in data]

    async def get_stats(self) -> ProductStats:
        """Fetch the Total/Defective/Available aggregate.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response
        """
        data = await self._get_json("/products/stats")
        return ProductStats.model_validate(data)
