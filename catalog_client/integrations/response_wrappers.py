"""
Catalogue response normalization.

Turns raw JSON payloads from the catalogue API into the immutable contracts in
integrations/contracts/products.py.

Two levels, two policies:
- Top-level body problems (not JSON, not an object, no `products` list) raise
  DecodeError.
- Field-level problems inside a record never raise. Absent or null fields take
  the default from the field tables below; wrong-typed fields are coerced when
  the value is safely representable and defaulted otherwise. Every coercion
  failure is logged and, when the caller passes a list, recorded as a
  FieldAnomaly.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple, Union

from .contracts.errors import DecodeError
from .contracts.products import REVIEW_DATE_SENTINEL, Dimensions, Product, ProductPage, Review

logger = logging.getLogger(__name__)

RawValue = Union[None, bool, int, float, str, List["RawValue"], Dict[str, "RawValue"]]
FieldKind = Literal["int", "float", "str", "str_list", "date", "dimensions", "reviews"]

_INT_LIMIT = 2 ** 63


@dataclass(frozen=True)
class FieldSpec:
    keys: Tuple[str, ...]                # accepted JSON keys, in priority order
    kind: FieldKind
    default: Any


@dataclass(frozen=True)
class FieldAnomaly:
    path: str
    reason: str
    value: Any


# ---------------------------------------------------------------------------
# Field tables (single source of truth for keys and defaults)
# ---------------------------------------------------------------------------

DIMENSION_FIELDS: Dict[str, FieldSpec] = {
    "width": FieldSpec(("width",), "float", 0.0),
    "height": FieldSpec(("height",), "float", 0.0),
    "depth": FieldSpec(("depth",), "float", 0.0),
}

REVIEW_FIELDS: Dict[str, FieldSpec] = {
    "rating": FieldSpec(("rating",), "int", 0),
    "comment": FieldSpec(("comment",), "str", ""),
    "reviewer_name": FieldSpec(("reviewerName",), "str", ""),
    "reviewer_email": FieldSpec(("reviewerEmail",), "str", ""),
    "date": FieldSpec(("date",), "date", REVIEW_DATE_SENTINEL),
}

PRODUCT_FIELDS: Dict[str, FieldSpec] = {
    "product_id": FieldSpec(("id", "productId"), "int", 0),
    "title": FieldSpec(("title",), "str", ""),
    "description": FieldSpec(("description", "productDescription"), "str", ""),
    "category": FieldSpec(("category",), "str", ""),
    "price": FieldSpec(("price",), "float", 0.0),
    "discount_percentage": FieldSpec(("discountPercentage",), "float", 0.0),
    "rating": FieldSpec(("rating",), "float", 0.0),
    "weight": FieldSpec(("weight",), "float", 0.0),
    "stock": FieldSpec(("stock",), "int", 0),
    "minimum_order_quantity": FieldSpec(("minimumOrderQuantity",), "int", 0),
    "tags": FieldSpec(("tags",), "str_list", ()),
    "brand": FieldSpec(("brand",), "str", ""),
    "sku": FieldSpec(("sku",), "str", ""),
    "warranty_information": FieldSpec(("warrantyInformation",), "str", ""),
    "shipping_information": FieldSpec(("shippingInformation",), "str", ""),
    "availability_status": FieldSpec(("availabilityStatus",), "str", ""),
    "return_policy": FieldSpec(("returnPolicy",), "str", ""),
    "thumbnail": FieldSpec(("thumbnail",), "str", ""),
    "images": FieldSpec(("images",), "str_list", ()),
    "dimensions": FieldSpec(("dimensions",), "dimensions", Dimensions()),
    "reviews": FieldSpec(("reviews",), "reviews", ()),
}


# ---------------------------------------------------------------------------
# Total coercions: each returns None when the value is not representable
# ---------------------------------------------------------------------------

def coerce_float(value: RawValue) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def coerce_int(value: RawValue) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(value.strip()) if isinstance(value, str) else None
        except ValueError:
            number = None
        if number is None:
            as_float = coerce_float(value)
            if as_float is None or not as_float.is_integer():
                return None
            number = int(as_float)
    # 64-bit range only
    return number if -_INT_LIMIT <= number < _INT_LIMIT else None


def coerce_str(value: RawValue) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def coerce_str_list(value: RawValue) -> Optional[Tuple[str, ...]]:
    if not isinstance(value, (list, tuple)):
        return None
    return tuple(item for item in value if isinstance(item, str))


def parse_review_date(value: RawValue) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text[-1] in "Zz":
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


_SCALAR_COERCERS: Dict[str, Callable[[RawValue], Any]] = {
    "int": coerce_int,
    "float": coerce_float,
    "str": coerce_str,
    "str_list": coerce_str_list,
    "date": parse_review_date,
}


# ---------------------------------------------------------------------------
# Record decoders (total)
# ---------------------------------------------------------------------------

def decode_dimensions(
    raw: RawValue,
    anomalies: Optional[List[FieldAnomaly]] = None,
    *,
    path: str = "dimensions",
) -> Dimensions:
    if not isinstance(raw, dict):
        _record(anomalies, path, "expected an object", raw)
        return Dimensions()
    return Dimensions(**_decode_fields(raw, DIMENSION_FIELDS, path, anomalies))


def decode_review(
    raw: RawValue,
    anomalies: Optional[List[FieldAnomaly]] = None,
    *,
    path: str = "review",
) -> Review:
    if not isinstance(raw, dict):
        _record(anomalies, path, "expected an object", raw)
        return Review()
    return Review(**_decode_fields(raw, REVIEW_FIELDS, path, anomalies))


def decode_product(
    raw: RawValue,
    anomalies: Optional[List[FieldAnomaly]] = None,
    *,
    path: str = "product",
) -> Product:
    """
    Decode one raw product record. Never raises.

    Args:
        raw: Parsed JSON value, normally a dict.
        anomalies: Optional list that receives a FieldAnomaly for every field
            that had to be coerced away or defaulted because of its type.
        path: Prefix used in anomaly paths and log lines.
    """
    if not isinstance(raw, dict):
        _record(anomalies, path, "expected an object", raw)
        return Product()

    values = _decode_fields(raw, PRODUCT_FIELDS, path, anomalies)
    if values["price"] < 0:
        _record(anomalies, f"{path}.price", "negative price", values["price"])
        values["price"] = 0.0
    return Product(**values)


def record_product_id(raw: RawValue) -> Optional[int]:
    """Product id of a raw record, read with the same keys as decode_product; None if unusable."""
    if not isinstance(raw, dict):
        return None
    _, value = _lookup(raw, PRODUCT_FIELDS["product_id"].keys)
    return coerce_int(value) if value is not None else None


def decode_product_response(body: RawValue) -> Product:
    """Decode the body of a by-id lookup. A non-object body is a DecodeError."""
    if not isinstance(body, dict):
        raise DecodeError("Expected a JSON object for a product record.", body=_preview(body))
    return decode_product(body)


def decode_product_page(
    body: RawValue,
    anomalies: Optional[List[FieldAnomaly]] = None,
) -> ProductPage:
    """Decode a list/search/category body: {"products": [...], "total", "skip", "limit"}."""
    if not isinstance(body, dict):
        raise DecodeError("Expected a JSON object for a product listing.", body=_preview(body))
    records = body.get("products")
    if not isinstance(records, list):
        raise DecodeError("Product listing has no 'products' list.", body=_preview(body))

    products = tuple(
        decode_product(record, anomalies, path=f"products[{index}]")
        for index, record in enumerate(records)
    )
    return ProductPage(
        products=products,
        total=_page_int(body, "total", len(products), anomalies),
        skip=_page_int(body, "skip", 0, anomalies),
        limit=_page_int(body, "limit", len(products), anomalies),
    )


def parse_json_body(content: bytes) -> RawValue:
    """Parse a response body; empty, truncated or non-JSON content is a DecodeError."""
    if not content or not content.strip():
        raise DecodeError("Response body is empty.")
    try:
        return json.loads(content)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(
            f"Response body is not valid JSON: {exc}",
            body=content[:500].decode("utf-8", errors="replace"),
        ) from exc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _decode_fields(
    raw: Dict[str, RawValue],
    fields: Dict[str, FieldSpec],
    path: str,
    anomalies: Optional[List[FieldAnomaly]],
) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name, spec in fields.items():
        key, value = _lookup(raw, spec.keys)
        if value is None:
            values[name] = spec.default
            continue

        field_path = f"{path}.{key}"
        if spec.kind == "dimensions":
            values[name] = decode_dimensions(value, anomalies, path=field_path)
        elif spec.kind == "reviews":
            values[name] = _decode_reviews(value, anomalies, field_path)
        else:
            coerced = _SCALAR_COERCERS[spec.kind](value)
            if coerced is None:
                _record(anomalies, field_path, f"expected {spec.kind}", value)
                coerced = spec.default
            elif spec.kind == "str_list" and len(coerced) != len(value):
                _record(anomalies, field_path, "dropped non-string elements", value)
            values[name] = coerced
    return values


def _decode_reviews(
    value: RawValue,
    anomalies: Optional[List[FieldAnomaly]],
    path: str,
) -> Tuple[Review, ...]:
    if not isinstance(value, list):
        _record(anomalies, path, "expected a list", value)
        return ()
    # malformed entries become default reviews so positions are preserved
    return tuple(
        decode_review(item, anomalies, path=f"{path}[{index}]")
        for index, item in enumerate(value)
    )


def _lookup(raw: Dict[str, RawValue], keys: Tuple[str, ...]) -> Tuple[Optional[str], RawValue]:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return key, value
    return None, None


def _page_int(
    body: Dict[str, RawValue],
    key: str,
    default: int,
    anomalies: Optional[List[FieldAnomaly]],
) -> int:
    value = body.get(key)
    if value is None:
        return default
    number = coerce_int(value)
    if number is None or number < 0:
        _record(anomalies, key, "expected a non-negative int", value)
        return default
    return number


def _record(anomalies: Optional[List[FieldAnomaly]], path: str, reason: str, value: Any) -> None:
    logger.warning("Catalogue field anomaly at %s: %s (value=%s)", path, reason, _preview(value))
    if anomalies is not None:
        anomalies.append(FieldAnomaly(path=path, reason=reason, value=value))


def _preview(value: Any, limit: int = 200) -> str:
    text = repr(value)
    return text if len(text) <= limit else text[:limit] + "..."
