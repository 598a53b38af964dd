"""
Real HTTP integration clients.

These clients talk to the catalogue API over HTTP.

Important:
- Must implement the same CatalogueClient interface as the local clients
- Must return data shaped according to catalog_client/integrations/contracts/*
"""

from .product_catalogue import HttpProductCatalogueClient

__all__ = ["HttpProductCatalogueClient"]
