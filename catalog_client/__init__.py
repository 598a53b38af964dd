"""
Async client for a product catalogue API.

    client = HttpProductCatalogueClient.from_config(load_catalog_config())
    product = await client.get_product(1)
"""

from .error_handler import ErrorHandler
from .integrations import (
    REVIEW_DATE_SENTINEL,
    CatalogError,
    CatalogueClient,
    DecodeError,
    Dimensions,
    FieldAnomaly,
    NotFoundError,
    Product,
    ProductPage,
    Review,
    TransportError,
    decode_product,
    decode_product_page,
)
from .integrations.clients.mocks import LocalProductCatalogueClient
from .integrations.clients.real_http import HttpProductCatalogueClient
from .utils import CatalogConfig, load_catalog_config

__version__ = "0.1.0"

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogueClient",
    "DecodeError",
    "Dimensions",
    "ErrorHandler",
    "FieldAnomaly",
    "HttpProductCatalogueClient",
    "LocalProductCatalogueClient",
    "NotFoundError",
    "Product",
    "ProductPage",
    "REVIEW_DATE_SENTINEL",
    "Review",
    "TransportError",
    "decode_product",
    "decode_product_page",
    "load_catalog_config",
]
