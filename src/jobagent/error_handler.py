# src/jobagent/error_handler.py
"""
Turn tool failures into the uniform error envelope.

The agent only ever sees {"action": "error", "error": ..., "jobs": []};
this module decides the wording for each failure category.
"""

from __future__ import annotations

import logging

from jobagent.errors import (
    AdzunaError,
    ConfigurationMissingError,
    InvalidRequestError,
    ProviderNetworkError,
    ProviderResponseError,
    ProviderStatusError,
    ProviderTimeoutError,
)
from jobagent.models import SearchResult
from jobagent.settings import APP_ID_ENV, APP_KEY_ENV

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An unexpected error occurred while searching Adzuna"


def error_result(message: str) -> SearchResult:
    return {"action": "error", "error": message or GENERIC_ERROR, "jobs": []}


def convert_exception_to_result(exception: BaseException) -> SearchResult:
    """
    Convert an exception raised while searching into an error envelope.
    Logs each failure once: a warning for known categories, an error with
    traceback for anything else.
    """
    if isinstance(exception, AdzunaError):
        logger.warning("Adzuna search failed: %s", exception)
    # --- Config/validation: nothing was sent ---
    if isinstance(exception, ConfigurationMissingError):
        return error_result(
            "Adzuna API credentials are not configured. "
            f"Please add {APP_ID_ENV} and {APP_KEY_ENV} to your environment variables."
        )

    if isinstance(exception, InvalidRequestError):
        return error_result(str(exception))

    # --- Provider answered, but not with jobs ---
    if isinstance(exception, ProviderStatusError):
        return error_result(
            f"Adzuna API returned error: {exception.status} {exception.reason}".rstrip()
        )

    # --- Transient failures that outlived the retries ---
    if isinstance(exception, ProviderTimeoutError):
        return error_result(
            f"Adzuna API request timed out after {exception.attempts} attempts"
        )

    if isinstance(exception, ProviderNetworkError):
        return error_result(
            f"Network error connecting to Adzuna: {exception.code} "
            f"(after {exception.attempts} attempts)"
        )

    if isinstance(exception, (ProviderResponseError, AdzunaError)):
        return error_result(str(exception))

    # --- Unknown/unexpected errors ---
    logger.error(
        "Unhandled error in Adzuna search: %s",
        exception,
        extra={"error_type": type(exception).__name__},
        exc_info=exception,
    )
    return error_result(str(exception))
