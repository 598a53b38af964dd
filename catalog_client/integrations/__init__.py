"""
Integrations layer.
This package contains all code used to communicate with the product catalogue API:
- contracts/: models, error taxonomy and the CatalogueClient interface
- response_wrappers.py: total decoding of raw JSON records into contracts
- clients/: the real HTTP client and the local development client

Key rule:
- Callers MUST NOT call the catalogue API directly; they go through a CatalogueClient.
"""

from .contracts import (
    REVIEW_DATE_SENTINEL,
    CatalogError,
    CatalogueClient,
    DecodeError,
    Dimensions,
    NotFoundError,
    Product,
    ProductPage,
    Review,
    TransportError,
)
from .response_wrappers import (
    FieldAnomaly,
    decode_dimensions,
    decode_product,
    decode_product_page,
    decode_review,
)

__all__ = [
    # contracts
    "CatalogError", "CatalogueClient", "DecodeError", "Dimensions", "NotFoundError",
    "Product", "ProductPage", "REVIEW_DATE_SENTINEL", "Review", "TransportError",
    # decoding
    "FieldAnomaly", "decode_dimensions", "decode_product", "decode_product_page", "decode_review",
]
