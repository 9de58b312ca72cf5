# cpqsync.services.shopify.client

import logging
import httpx
from typing import Dict, List, Optional

from cpqsync.core.exceptions import ShopifyAPIError, SourceFetchError
from cpqsync.core.config import get_settings
from cpqsync.schemas.shopify import ShopifyProduct
from cpqsync.services.http_utils import is_success

logger = logging.getLogger(__name__)


class ShopifyRestClient:
    """
    Minimal async client for the Shopify Admin REST API.

    Only the product listing is needed: the sync reads one page of products
    (with their variants) per run and never writes back to Shopify.
    """

    def __init__(
        self,
        store_url: Optional[str] = None,
        admin_token: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.store_url = (store_url if store_url is not None else settings.SHOPIFY_STORE_URL).rstrip("/")
        self.admin_token = admin_token if admin_token is not None else settings.SHOPIFY_ADMIN_TOKEN
        self.api_version = api_version or settings.SHOPIFY_API_VERSION
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.base_url = f"{self.store_url}/admin/api/{self.api_version}"
        logger.debug(f"ShopifyRestClient initialized for {self.store_url} (API version {self.api_version})")

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests"""
        return {
            "X-Shopify-Access-Token": self.admin_token,
            "Content-Type": "application/json",
        }

    async def _make_request(self, method: str, endpoint: str, params: Optional[Dict] = None) -> Dict:
        """
        Make a request to the Shopify Admin API

        Raises:
            ShopifyAPIError: If the API request fails
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug(f"Making {method} request to {url} params={params}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._get_headers(),
                    params=params
                )
        except httpx.TimeoutException as e:
            logger.error(f"Shopify timeout: {str(e)}")
            raise ShopifyAPIError(f"Request timed out: {str(e)}")
        except httpx.RequestError as e:
            logger.error(f"Shopify network error: {str(e)}")
            raise ShopifyAPIError(f"Network error: {str(e)}")

        if not is_success(response):
            logger.error(f"Shopify API error {response.status_code}: {response.text}")
            raise ShopifyAPIError(f"Request failed ({response.status_code}): {response.text}")

        return response.json()

    async def get_products(self, limit: Optional[int] = None) -> List[ShopifyProduct]:
        """
        Fetch a single page of products with their variants.

        Raises:
            SourceFetchError: If the product list cannot be retrieved
        """
        limit = limit or get_settings().SHOPIFY_PRODUCT_LIMIT
        try:
            data = await self._make_request("GET", "/products.json", params={"limit": limit})
        except ShopifyAPIError as e:
            raise SourceFetchError(f"Failed to fetch Shopify products: {str(e)}") from e

        products = [ShopifyProduct.model_validate(p) for p in (data.get("products") or [])]
        logger.info(f"Fetched {len(products)} products from Shopify")
        return products
