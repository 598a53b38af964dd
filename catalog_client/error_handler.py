"""Error handling helpers for catalogue callers."""
from typing import Any, Dict, Optional
import logging

from catalog_client.integrations.contracts.errors import DecodeError, NotFoundError, TransportError

logger = logging.getLogger(__name__)

_MESSAGES = {
    "not_found": "The requested product could not be found.",
    "transport": "The product catalogue is unavailable right now. Please try again later.",
    "decode": "The product catalogue returned data we could not read. Please try again later.",
    "internal": "An internal error occurred while loading the catalogue. Please try again later.",
}


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        kind = error_kind(exc)
        if kind == "internal":
            logger.error("Unhandled exception while loading catalogue: %s", exc, exc_info=True)
        else:
            logger.warning("Catalogue %s error: %s", kind, exc)
        return {
            "message": _MESSAGES[kind],
            "fallback": True,
            "metadata": {
                "error": str(exc),
                "error_kind": kind,
                "status_code": getattr(exc, "status_code", None),
                "context": context or {},
            },
        }


def error_kind(exc: Exception) -> str:
    # NotFoundError first: it is also a TransportError
    if isinstance(exc, NotFoundError):
        return "not_found"
    if isinstance(exc, TransportError):
        return "transport"
    if isinstance(exc, DecodeError):
        return "decode"
    return "internal"
