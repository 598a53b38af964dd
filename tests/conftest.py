"""Pytest fixtures for catalogue decoding and client tests."""

import copy

import pytest

PRODUCT_RECORD = {
    "id": 1,
    "title": "Essence Mascara Lash Princess",
    "description": "A popular mascara known for its volumizing and lengthening effects.",
    "category": "beauty",
    "price": 9.99,
    "discountPercentage": 7.17,
    "rating": 4.94,
    "stock": 5,
    "tags": ["beauty", "mascara"],
    "brand": "Essence",
    "sku": "RCH45Q1A",
    "weight": 2,
    "dimensions": {"width": 23.17, "height": 14.43, "depth": 28.01},
    "warrantyInformation": "1 month warranty",
    "shippingInformation": "Ships in 1 month",
    "availabilityStatus": "Low Stock",
    "reviews": [
        {
            "rating": 2,
            "comment": "Very unhappy with my purchase!",
            "date": "2024-05-23T08:56:21.618Z",
            "reviewerName": "John Doe",
            "reviewerEmail": "john.doe@x.dummyjson.com",
        },
        {
            "rating": 4,
            "comment": "Not as described!",
            "date": "2024-05-23T08:56:21.618Z",
            "reviewerName": "Nolan Gonzalez",
            "reviewerEmail": "nolan.gonzalez@x.dummyjson.com",
        },
        {
            "rating": 5,
            "comment": "Very satisfied!",
            "date": "2024-05-23T08:56:21.618Z",
            "reviewerName": "Scarlett Wright",
            "reviewerEmail": "scarlett.wright@x.dummyjson.com",
        },
    ],
    "returnPolicy": "30 days return policy",
    "minimumOrderQuantity": 24,
    "meta": {"barcode": "9164035109868", "qrCode": "..."},
    "images": ["https://cdn.dummyjson.com/products/images/beauty/1.png"],
    "thumbnail": "https://cdn.dummyjson.com/products/images/beauty/thumbnail.png",
}


def make_record(product_id: int, **overrides):
    record = copy.deepcopy(PRODUCT_RECORD)
    record["id"] = product_id
    record.update(overrides)
    return record


@pytest.fixture
def product_record():
    """A full, well-formed product record as returned by the catalogue API."""
    return make_record(1)


@pytest.fixture
def record_factory():
    """Build product records with a given id and field overrides."""
    return make_record
