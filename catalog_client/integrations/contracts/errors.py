"""
Catalogue error taxonomy.

- TransportError: connection failure, timeout, or a non-2xx status
- NotFoundError: the backend reported that a requested record does not exist
- DecodeError: the transport succeeded but the body is not usable JSON

Field-level problems inside a record are NOT errors; the decoder absorbs them
with defaults (see integrations/response_wrappers.py).
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class TransportError(CatalogError):
    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message, payload={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class NotFoundError(TransportError):
    pass


class DecodeError(CatalogError):
    def __init__(self, message: str, *, body: str = "") -> None:
        super().__init__(message, payload={"body": body})
        self.body = body
