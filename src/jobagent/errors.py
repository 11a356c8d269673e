# src/jobagent/errors.py
"""
Failure categories for the Adzuna tool.

Transient errors (timeouts and a few connection-level failures) are retried
by the client; everything else stops the search on the first occurrence.
"""

from typing import Optional


class AdzunaError(Exception):
    """Base exception for the Adzuna tool."""
    pass


# --- Fatal, raised before any network call ---
class ConfigurationMissingError(AdzunaError):
    """ADZUNA_APP_ID and/or ADZUNA_APP_KEY are not set."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Missing Adzuna configuration: {', '.join(missing)}")
        self.missing = missing


class InvalidRequestError(AdzunaError):
    """The caller's search arguments cannot be sent to Adzuna."""
    pass


# --- Fatal, raised after a response came back ---
class ProviderStatusError(AdzunaError):
    """Adzuna answered with a non-2xx status."""

    def __init__(self, status: int, reason: str = ""):
        super().__init__(f"{status} {reason}".strip())
        self.status = status
        self.reason = reason


class ProviderResponseError(AdzunaError):
    """The response body could not be used (bad JSON, missing results)."""
    pass


# --- Transient ---
class TransientProviderError(AdzunaError):
    """A failure worth retrying. `attempts` is filled in once retries stop."""

    def __init__(self, message: str, attempts: int = 0):
        super().__init__(message)
        self.attempts = attempts


class ProviderTimeoutError(TransientProviderError):
    """No response within the per-attempt timeout."""
    pass


class ProviderNetworkError(TransientProviderError):
    """Connection timed out, was reset or was refused."""

    def __init__(self, code: str, attempts: int = 0, detail: Optional[str] = None):
        super().__init__(detail or code, attempts)
        self.code = code


__all__ = [
    "AdzunaError",
    "ConfigurationMissingError",
    "InvalidRequestError",
    "ProviderStatusError",
    "ProviderResponseError",
    "TransientProviderError",
    "ProviderTimeoutError",
    "ProviderNetworkError",
]
