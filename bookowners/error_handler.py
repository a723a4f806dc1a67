"""Error handling helpers for the book owners API."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = 500


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while serving request %s: %s", context or {}, exc, exc_info=exc)
        return {
            "status": INTERNAL_SERVER_ERROR,
            "type": "Server error",
            "title": "Server Error",
            "detail": str(exc),
        }
