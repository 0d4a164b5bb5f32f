"""Custom logging configuration to reduce noise from polling endpoints."""

import logging
from typing import Set


class SuppressPollingEndpointsFilter(logging.Filter):
    """Filter that suppresses access logs for frequently-polled endpoints."""

    SUPPRESSED_PATTERNS: Set[str] = {
        "GET /healthz",
        "GET /api/healthz",
        "GET /api/ping",
        "GET /api/version",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        """Drop successful polls; keep everything else."""
        message = record.getMessage()
        if not self._is_success(record, message):
            return True
        return not any(pattern in message for pattern in self.SUPPRESSED_PATTERNS)

    @staticmethod
    def _is_success(record: logging.LogRecord, message: str) -> bool:
        # uvicorn.access passes the status code as the last arg
        args = record.args
        if isinstance(args, tuple) and args:
            try:
                return int(args[-1]) == 200
            except (TypeError, ValueError):
                pass
        return " 200" in message


def configure_logging():
    """Configure application logging with polling suppression."""
    logger = logging.getLogger(__name__)

    access_logger = logging.getLogger("uvicorn.access")
    filter_instance = SuppressPollingEndpointsFilter()

    for handler in access_logger.handlers:
        handler.addFilter(filter_instance)

    # Suppress external library INFO/DEBUG logs (keep WARNING+)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Per-call scoring summaries
    logging.getLogger("app.domain").setLevel(logging.DEBUG)
    logging.getLogger("app.algos").setLevel(logging.DEBUG)

    logging.getLogger("uvicorn.error").setLevel(logging.DEBUG)

    logger.info(
        f"Logging configured: {len(SuppressPollingEndpointsFilter.SUPPRESSED_PATTERNS)} "
        "polling patterns suppressed, scoring logging verbose"
    )
