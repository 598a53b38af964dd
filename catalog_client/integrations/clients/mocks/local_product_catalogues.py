"""
Local Product Catalogue Client (Mock/Local).

Purpose:
- Development-time catalogue source that needs no network access
- Serves raw product records from memory or a local JSON file and decodes
  them through the same normalizers as the HTTP client

Accepted file shapes:
- a JSON list of product records
- a JSON object with a "products" list (a saved API response)

Swap:
Replace with clients/real_http/product_catalogue.py when the catalogue API is reachable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from catalog_client.integrations.contracts.errors import DecodeError, NotFoundError
from catalog_client.integrations.contracts.interfaces import CatalogueClient, validate_paging
from catalog_client.integrations.contracts.products import Product, ProductPage
from catalog_client.integrations.response_wrappers import decode_product, decode_product_page, record_product_id

logger = logging.getLogger(__name__)

_SEARCH_KEYS = ("title", "description", "brand", "category")


class LocalProductCatalogueClient(CatalogueClient):
    def __init__(
        self,
        records: Optional[List[Dict[str, Any]]] = None,
        data_path: Optional[Path] = None,
    ) -> None:
        if records is None and data_path is None:
            raise ValueError("Either records or data_path must be provided.")
        self._records: List[Dict[str, Any]] = list(records) if records is not None else _load_records(data_path)
        logger.info(f"[LOCAL] Catalogue loaded with {len(self._records)} records")

    async def get_product(self, product_id: int) -> Product:
        for record in self._records:
            if record_product_id(record) == product_id:
                return decode_product(record)
        raise NotFoundError(f"Product {product_id} not found.", status_code=404)

    async def get_product_page(self, limit: int = 30, skip: int = 0) -> ProductPage:
        validate_paging(limit, skip)
        return self._page(self._records, limit, skip)

    async def search_product_page(self, query: str, limit: int = 30, skip: int = 0) -> ProductPage:
        validate_paging(limit, skip)
        needle = query.strip().lower()
        matches = [r for r in self._records if _matches(r, needle)]
        logger.info(f"[LOCAL] Search {query!r} matched {len(matches)} records")
        return self._page(matches, limit, skip)

    async def get_products_by_category(self, category: str, limit: int = 30, skip: int = 0) -> List[Product]:
        validate_paging(limit, skip)
        wanted = category.strip().lower()
        matches = [
            r for r in self._records
            if isinstance(r, dict) and str(r.get("category") or "").lower() == wanted
        ]
        return list(self._page(matches, limit, skip).products)

    @staticmethod
    def _page(records: List[Dict[str, Any]], limit: int, skip: int) -> ProductPage:
        window = records[skip:] if limit == 0 else records[skip:skip + limit]
        return decode_product_page({
            "products": window,
            "total": len(records),
            "skip": skip,
            "limit": len(window) if limit == 0 else limit,
        })


def _matches(record: Any, needle: str) -> bool:
    if not isinstance(record, dict):
        return False
    if not needle:
        return True
    return any(needle in str(record.get(key) or "").lower() for key in _SEARCH_KEYS)


def _load_records(data_path: Path) -> List[Dict[str, Any]]:
    if not data_path.exists():
        raise FileNotFoundError(f"Catalogue data file not found: {data_path}")
    raw_text = data_path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw_text)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"Catalogue data file is not valid JSON: {data_path}", body=raw_text[:500]) from exc

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise DecodeError(f"Catalogue data file has no product list: {data_path}", body=raw_text[:500])
    return data
