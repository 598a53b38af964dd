"""
Product catalogue contracts.

Immutable domain models for catalogue records:
- Product, with its nested Dimensions and Review values
- ProductPage, the envelope returned by list/search endpoints

These models are built ONLY by the decoder in integrations/response_wrappers.py
(or directly in tests). They never talk to the network and never mutate after
construction; every field has a zero default so an empty record still yields a
valid Product.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

REVIEW_DATE_SENTINEL = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Dimensions(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = 0.0
    height: float = 0.0
    depth: float = 0.0

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth


class Review(BaseModel):
    model_config = ConfigDict(frozen=True)

    rating: int = 0
    comment: str = ""
    reviewer_name: str = ""
    reviewer_email: str = ""
    date: datetime = REVIEW_DATE_SENTINEL   # sentinel when missing/unparseable

    @property
    def has_date(self) -> bool:
        return self.date != REVIEW_DATE_SENTINEL

    @property
    def is_positive(self) -> bool:
        return self.rating >= 4

    @property
    def is_negative(self) -> bool:
        return self.rating <= 2


class Product(BaseModel):
    """A single catalogue product. Identity is product_id."""

    model_config = ConfigDict(frozen=True)

    product_id: int = 0
    title: str = ""
    description: str = ""
    category: str = ""
    price: float = 0.0
    discount_percentage: float = 0.0
    rating: float = 0.0
    weight: float = 0.0
    stock: int = 0
    minimum_order_quantity: int = 0
    tags: Tuple[str, ...] = ()
    brand: str = ""
    sku: str = ""
    warranty_information: str = ""
    shipping_information: str = ""
    availability_status: str = ""
    return_policy: str = ""
    thumbnail: str = ""
    images: Tuple[str, ...] = ()
    dimensions: Dimensions = Field(default_factory=Dimensions)
    reviews: Tuple[Review, ...] = ()

    # -- Derived values ---------------------------------------------------

    @property
    def discounted_price(self) -> float:
        """Price after discount_percentage, never below zero."""
        return max(0.0, self.price * (1 - self.discount_percentage / 100))

    @property
    def is_in_stock(self) -> bool:
        return self.stock > 0

    @property
    def is_on_sale(self) -> bool:
        return self.discount_percentage > 0

    @property
    def display_price(self) -> str:
        """Price as a US-dollar string, e.g. "$1,299.00"."""
        return f"${self.price:,.2f}"

    @property
    def display_discount(self) -> str:
        return f"-{self.discount_percentage:.0f}%" if self.is_on_sale else ""

    @property
    def average_review_rating(self) -> float:
        if not self.reviews:
            return 0.0
        return sum(r.rating for r in self.reviews) / len(self.reviews)

    def __str__(self) -> str:
        return f"Product(id={self.product_id}, title={self.title!r}, price={self.display_price}, stock={self.stock})"


class ProductPage(BaseModel):
    """One page of a list/search/category response."""

    model_config = ConfigDict(frozen=True)

    products: Tuple[Product, ...] = ()
    total: int = 0
    skip: int = 0
    limit: int = 0

    @property
    def has_more(self) -> bool:
        return self.skip + len(self.products) < self.total

    @property
    def current_page(self) -> int:
        return self.skip // self.limit + 1 if self.limit > 0 else 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit > 0 else 1
