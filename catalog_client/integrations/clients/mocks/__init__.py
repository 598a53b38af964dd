"""
Local integration clients.

These clients serve catalogue data without calling any external API.
They are used when:
- the catalogue API is not reachable
- we want to exercise catalogue consumers end-to-end without network access

Important:
- Local clients must follow the SAME CatalogueClient interface as real HTTP clients.
- Local clients return data shaped according to catalog_client/integrations/contracts/*
"""

from .local_product_catalogues import LocalProductCatalogueClient

__all__ = ["LocalProductCatalogueClient"]
