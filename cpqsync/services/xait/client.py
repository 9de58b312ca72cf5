import json
import logging
import httpx
from typing import Any, Dict, List, Optional, Type

from cpqsync.core.config import get_settings
from cpqsync.core.enums import ListFilterOperator
from cpqsync.core.exceptions import XaitAPIError, PartLookupError, PartWriteError
from cpqsync.schemas.xait import XaitPart
from cpqsync.services.sku_utils import extract_list_items, part_sku, sku_key
from cpqsync.services.http_utils import is_success, response_detail

logger = logging.getLogger(__name__)


class XaitClient:
    """
    Async client for the XaitCPQ part catalog.

    Functionality:
        - Looking parts up by SKU through a configured data list view
          (find_part_by_sku, with an equals query and a contains fallback).
        - Creating parts (add_part) and updating them by id (update_part).

    Every call takes the bearer token explicitly; tokens come from
    XaitAuthManager and live for a single sync run.
    """

    PAGE_NUMBER = 1
    PAGE_SIZE = 25

    def __init__(
        self,
        api_url: Optional[str] = None,
        list_view_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_url = (api_url if api_url is not None else settings.XAIT_API_URL).rstrip("/")
        self.list_view_id = list_view_id if list_view_id is not None else settings.XAIT_PART_LIST_VIEW_ID
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT

    def _get_headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        token: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        error_cls: Type[XaitAPIError] = XaitAPIError,
    ) -> Any:
        """
        Make a request to the XaitCPQ API

        Raises:
            error_cls: If the request fails or returns a non-2xx status
        """
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        logger.debug(f"Making {method} request to {url}")
        if params:
            logger.debug(f"Params: {params}")
        if data:
            logger.debug(f"Data: {json.dumps(data)[:500]}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=self._get_headers(token),
                    json=data,
                    params=params
                )
        except httpx.TimeoutException as e:
            raise error_cls(f"Request timed out: {str(e)}")
        except httpx.RequestError as e:
            raise error_cls(f"Network error: {str(e)}")

        if not is_success(response):
            raise error_cls(
                f"Request failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
                detail=response_detail(response)
            )

        if response.status_code == 204 or not response.content:
            return {}
        return response_detail(response)

    # Lookup

    def _list_params(self, sku: str, operator: ListFilterOperator) -> Dict[str, Any]:
        return {
            "sortField": "PartNumber",
            "sortDirection": 0,
            "filters[0]": "PartNumber",
            "operators[0]": int(operator),
            "values[0]": sku,
            "groups[0]": 0,
        }

    async def list_parts(self, params: Dict[str, Any], token: str) -> List[Dict[str, Any]]:
        """
        Query the first page of the configured part list view.

        Raises:
            PartLookupError: If the query fails
        """
        endpoint = f"/data/list/part/{self.list_view_id}/{self.PAGE_NUMBER}/{self.PAGE_SIZE}"
        body = await self._make_request("GET", endpoint, token, params=params, error_cls=PartLookupError)
        return extract_list_items(body)

    async def find_part_by_sku(self, sku: str, token: str) -> Optional[Dict[str, Any]]:
        """
        Find an existing part by SKU.

        Tries an equals filter first and returns its first row. If that is
        empty, retries with a contains filter and only accepts a row whose SKU
        matches exactly (ignoring case and surrounding whitespace).

        A failed query is logged and reported as "not found", so a lookup
        outage never stops the run.
        """
        if not self.list_view_id:
            logger.warning("XAIT_PART_LIST_VIEW_ID is not set; cannot lookup part by SKU.")
            return None

        try:
            items = await self.list_parts(self._list_params(sku, ListFilterOperator.EQUALS), token)
            if items and items[0] is not None:
                logger.info(f"Found existing part by SKU: {sku}")
                return items[0]

            items = await self.list_parts(self._list_params(sku, ListFilterOperator.CONTAINS), token)
            target = sku_key(sku)
            for item in items:
                if sku_key(part_sku(item)) == target:
                    logger.info(f"Found existing part by SKU (contains fallback): {sku}")
                    return item
        except PartLookupError as e:
            logger.warning(f"Failed to check existing part ({sku}) via Data List API: {e.detail}")
            return None

        logger.info(f"No existing part found for {sku}")
        return None

    # Writes

    async def add_part(self, part: XaitPart, token: str) -> Any:
        """
        Create a part.

        Raises:
            PartWriteError: If XaitCPQ rejects the part or the request fails
        """
        result = await self._make_request(
            "POST", "/part/add", token, data=part.to_payload(), error_cls=PartWriteError
        )
        logger.info(f"Added part: {part.part_number}")
        return result

    async def update_part(self, part_id: Any, part: XaitPart, token: str) -> Any:
        """
        Update an existing part by its XaitCPQ id.

        Raises:
            PartWriteError: If XaitCPQ rejects the update or the request fails
        """
        result = await self._make_request(
            "PUT", f"/part/{part_id}", token, data=part.to_payload(), error_cls=PartWriteError
        )
        logger.info(f"Updated part: {part.part_number}")
        return result
