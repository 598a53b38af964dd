"""
Real Product Catalogue HTTP Client.

Purpose:
- Fetches product records from the catalogue API (DummyJSON-shaped endpoints)
- Normalizes them into the Product / ProductPage contracts

Endpoints:
- GET /products/{id}
- GET /products?limit={n}&skip={m}
- GET /products/search?q={query}&limit={n}&skip={m}
- GET /products/category/{category}?limit={n}&skip={m}

Implementation notes:
- Uses httpx for async requests, one request per call
- No retries, no caching, no pagination following; the caller owns recovery
- Non-2xx responses become TransportError (NotFoundError for a by-id 404) and
  unusable bodies become DecodeError; nothing is partially decoded
- asyncio cancellation is not intercepted, so cancelling the task aborts the request
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from catalog_client.integrations.contracts.errors import NotFoundError, TransportError
from catalog_client.integrations.contracts.interfaces import CatalogueClient, validate_paging
from catalog_client.integrations.contracts.products import Product, ProductPage
from catalog_client.integrations.response_wrappers import (
    RawValue,
    decode_product_page,
    decode_product_response,
    parse_json_body,
)
from catalog_client.utils.config_loader import CatalogConfig

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://dummyjson.com"


class HttpProductCatalogueClient(CatalogueClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 30.0,
        default_headers: Optional[Dict[str, str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("CATALOG_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.api_key = api_key or os.getenv("CATALOG_API_KEY", "")
        self.timeout_seconds = timeout_seconds
        self.default_headers = dict(default_headers or {})
        # Shared session owned by the caller; used read-only and never closed here.
        self._http_client = http_client

    @classmethod
    def from_config(
        cls,
        config: CatalogConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "HttpProductCatalogueClient":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key or None,
            timeout_seconds=config.timeout_seconds,
            default_headers=config.default_headers,
            http_client=http_client,
        )

    # -- Operations --

    async def get_product(self, product_id: int) -> Product:
        body = await self._get_json(f"/products/{product_id}", not_found_label=f"Product {product_id}")
        return decode_product_response(body)

    async def get_product_page(self, limit: int = 30, skip: int = 0) -> ProductPage:
        validate_paging(limit, skip)
        body = await self._get_json("/products", params={"limit": limit, "skip": skip})
        return decode_product_page(body)

    async def search_product_page(self, query: str, limit: int = 30, skip: int = 0) -> ProductPage:
        # Empty or blank queries are forwarded as-is; the backend decides what they match.
        validate_paging(limit, skip)
        body = await self._get_json("/products/search", params={"q": query, "limit": limit, "skip": skip})
        return decode_product_page(body)

    async def get_products_by_category(self, category: str, limit: int = 30, skip: int = 0) -> List[Product]:
        validate_paging(limit, skip)
        body = await self._get_json(
            f"/products/category/{quote(category, safe='')}",
            params={"limit": limit, "skip": skip},
            not_found_label=f"Category {category!r}",
        )
        return list(decode_product_page(body).products)

    # -- Transport --

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json", **self.default_headers}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        not_found_label: Optional[str] = None,
    ) -> RawValue:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=params, headers=self._headers())
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.get(url, params=params, headers=self._headers())
        except httpx.TimeoutException as exc:
            logger.warning("Catalogue request timed out: GET %s: %s", url, exc)
            raise TransportError(f"Request to {url} timed out.") from exc
        except httpx.HTTPError as exc:
            logger.error("Catalogue request failed: GET %s: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        if response.status_code == 404 and not_found_label:
            raise NotFoundError(
                f"{not_found_label} not found.",
                status_code=response.status_code,
                body=response.text,
            )
        if not response.is_success:
            logger.error("Catalogue request returned HTTP %s: GET %s", response.status_code, url)
            raise TransportError(
                f"Request to {url} returned HTTP {response.status_code}.",
                status_code=response.status_code,
                body=response.text,
            )
        return parse_json_body(response.content)
