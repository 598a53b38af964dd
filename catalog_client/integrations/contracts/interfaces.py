from abc import ABC, abstractmethod
from typing import List

from .products import Product, ProductPage


# ---------------------------------------------------------------------------
# Abstract catalogue interface
# ---------------------------------------------------------------------------

class CatalogueClient(ABC):
    """Every product catalogue client (HTTP or local) must implement this interface."""

    # -- Single product --

    @abstractmethod
    async def get_product(self, product_id: int) -> Product:
        """Fetch one product by id. Raises NotFoundError when absent."""

    # -- Pages --

    @abstractmethod
    async def get_product_page(self, limit: int = 30, skip: int = 0) -> ProductPage:
        """Fetch one page of products with its paging metadata."""

    @abstractmethod
    async def search_product_page(self, query: str, limit: int = 30, skip: int = 0) -> ProductPage:
        """Fetch one page of products matching a free-text query."""

    @abstractmethod
    async def get_products_by_category(self, category: str, limit: int = 30, skip: int = 0) -> List[Product]:
        """Return products in a single category."""

    # -- Convenience wrappers shared by every implementation --

    async def get_products(self, limit: int = 30, skip: int = 0) -> List[Product]:
        page = await self.get_product_page(limit=limit, skip=skip)
        return list(page.products)

    async def get_all_products(self) -> List[Product]:
        # limit=0 means "no limit" for the catalogue API
        page = await self.get_product_page(limit=0, skip=0)
        return list(page.products)

    async def search_products(self, query: str, limit: int = 30, skip: int = 0) -> List[Product]:
        page = await self.search_product_page(query, limit=limit, skip=skip)
        return list(page.products)


def validate_paging(limit: int, skip: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must be >= 0; got {limit}.")
    if skip < 0:
        raise ValueError(f"skip must be >= 0; got {skip}.")
