"""
Contracts (data models).

This folder defines the shapes shared by every catalogue client:
- Product / Dimensions / Review / ProductPage models
- the error taxonomy (TransportError, NotFoundError, DecodeError)
- the abstract CatalogueClient interface

Both the local and the real HTTP clients return these contracts, so callers
never handle ad-hoc dicts.
"""

from .errors import CatalogError, DecodeError, NotFoundError, TransportError
from .interfaces import CatalogueClient, validate_paging
from .products import REVIEW_DATE_SENTINEL, Dimensions, Product, ProductPage, Review

__all__ = [
    "CatalogError",
    "CatalogueClient",
    "DecodeError",
    "Dimensions",
    "NotFoundError",
    "Product",
    "ProductPage",
    "REVIEW_DATE_SENTINEL",
    "Review",
    "TransportError",
    "validate_paging",
]
