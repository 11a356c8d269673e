# src/jobagent/clients/adzuna.py

"""
Async client for Adzuna's Jobs API.

Design goals:
- Keep *all* HTTP details here (URL, headers, timeout, retries) so the tool
  layer only deals with typed errors and raw JSON.
- Each attempt races the request against a timer; whichever finishes first
  wins and the other is cancelled.
- Transient failures (timeouts, refused/reset/timed-out connections) are
  retried with exponential backoff; anything else is raised on the spot.
- Return raw JSON (dict) from Adzuna; mapping happens in pipeline.normalize.
"""

from __future__ import annotations

import asyncio
import errno
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from jobagent.errors import (
    ConfigurationMissingError,
    ProviderNetworkError,
    ProviderResponseError,
    ProviderStatusError,
    ProviderTimeoutError,
    TransientProviderError,
)
from jobagent.settings import AdzunaSettings

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

# US market, first page only
ADZUNA_SEARCH_URL = "https://api.adzuna.com/v1/api/jobs/us/search/1"

# errno -> the name we report back to the caller
_RETRYABLE_ERRNOS = {
    errno.ETIMEDOUT: "ETIMEDOUT",
    errno.ECONNRESET: "ECONNRESET",
    errno.ECONNREFUSED: "ECONNREFUSED",
}


# ---- Internal helpers ---------------------------------------------------------

def _default_headers(settings: AdzunaSettings) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "User-Agent": settings.user_agent,
    }


def build_search_params(
    settings: AdzunaSettings,
    query: str,
    *,
    results_per_page: int,
    where: Optional[str] = None,
) -> Dict[str, str]:
    """Query params Adzuna expects. `where` is left out entirely when empty."""
    params: Dict[str, str] = {
        "app_id": settings.app_id,
        "app_key": settings.app_key,
        "results_per_page": str(results_per_page),
        "what": query,
    }
    if where:
        params["where"] = where
    return params


def network_error_code(exc: BaseException) -> Optional[str]:
    """
    Walk the exception chain looking for a retryable connection failure.

    httpx wraps the socket error (httpx.ConnectError <- httpcore.ConnectError
    <- ConnectionRefusedError), so the OSError is usually a few causes deep.
    When the host has several addresses anyio tries each one and chains an
    ExceptionGroup of the per-address failures, so groups are searched too.
    """
    seen = set()
    pending: List[BaseException] = [exc]
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, httpx.ConnectTimeout):
            return "ETIMEDOUT"
        if isinstance(current, ConnectionRefusedError):
            return "ECONNREFUSED"
        if isinstance(current, ConnectionResetError):
            return "ECONNRESET"
        if isinstance(current, OSError) and current.errno in _RETRYABLE_ERRNOS:
            return _RETRYABLE_ERRNOS[current.errno]
        if isinstance(current, BaseExceptionGroup):
            pending.extend(reversed(current.exceptions))
        for linked in (current.__context__, current.__cause__):
            if linked is not None:
                pending.append(linked)
    return None


def _log_retry(retry_state: RetryCallState) -> None:
    delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.warning(
        "Retrying Adzuna request in %.1f seconds (attempt %d failed)",
        delay,
        retry_state.attempt_number,
        extra={"retry_attempt": retry_state.attempt_number, "delay_seconds": delay},
    )


async def _get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Dict[str, str],
    *,
    timeout_s: float,
) -> Dict[str, Any]:
    """
    One attempt: GET + status check + JSON decode.
    Raw httpx/asyncio failures leave this function as our typed errors.
    """
    try:
        resp = await asyncio.wait_for(client.get(url, params=params), timeout=timeout_s)
    except asyncio.TimeoutError as exc:
        raise ProviderTimeoutError(f"no response within {timeout_s:g}s") from exc
    except httpx.TransportError as exc:
        code = network_error_code(exc)
        if code is not None:
            raise ProviderNetworkError(code, detail=str(exc) or code) from exc
        if isinstance(exc, httpx.TimeoutException):
            raise ProviderTimeoutError(str(exc) or "request timed out") from exc
        raise

    if not resp.is_success:
        raise ProviderStatusError(resp.status_code, resp.reason_phrase)

    try:
        data = resp.json()
    except ValueError as exc:
        raise ProviderResponseError(f"Adzuna returned a malformed response body: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise ProviderResponseError("Adzuna response is missing a 'results' list")
    return data


# ---- Public API ----------------------------------------------------------------

async def adzuna_search(
    settings: AdzunaSettings,
    query: str,
    *,
    results_per_page: int = 20,
    where: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    sleep: Sleep = asyncio.sleep,
) -> Dict[str, Any]:
    """
    Fetch ONE page of search results from Adzuna and return the raw JSON (dict).

    Arguments:
    - settings: credentials plus timeout/retry policy.
    - query: what to search for, e.g. "data engineer".
    - results_per_page: page size; callers are expected to have bounded it.
    - where: optional location filter (e.g., "San Francisco, CA").
    - transport: swap in an httpx transport (tests use httpx.MockTransport).
    - sleep: awaited between attempts; tests pass a recorder instead of
      asyncio.sleep so backoff costs no wall time.

    Raises:
    - ConfigurationMissingError before any network traffic if credentials are unset.
    - ProviderStatusError / ProviderResponseError on the first occurrence.
    - ProviderTimeoutError / ProviderNetworkError once all attempts are used,
      with `attempts` set.
    """
    missing = settings.missing_keys()
    if missing:
        raise ConfigurationMissingError(missing)

    url = ADZUNA_SEARCH_URL
    params = build_search_params(
        settings, query, results_per_page=results_per_page, where=where
    )
    logger.info(
        "Adzuna API request: %s (location=%s, results=%d)",
        url,
        where or "any",
        results_per_page,
    )

    # attempt n waits backoff_base_s * 2^(n-1) before attempt n+1: 1s, 2s, 4s
    retrying = AsyncRetrying(
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.backoff_base_s, exp_base=2),
        retry=retry_if_exception_type(TransientProviderError),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True,
    )

    attempts = 0
    last_error: Optional[BaseException] = None
    async with httpx.AsyncClient(
        headers=_default_headers(settings),
        timeout=settings.timeout_s,
        transport=transport,
    ) as client:
        try:
            async for attempt in retrying:
                with attempt:
                    attempts = attempt.retry_state.attempt_number
                    try:
                        data = await _get_json(client, url, params, timeout_s=settings.timeout_s)
                    except TransientProviderError as exc:
                        last_error = exc
                        logger.error(
                            "Adzuna attempt %d/%d failed: %s",
                            attempts,
                            settings.max_retries,
                            exc,
                        )
                        raise
                    logger.info("Adzuna returned %d jobs (attempt %d)", len(data["results"]), attempts)
                    return data
        except TransientProviderError as exc:
            exc.attempts = attempts
            logger.error("All %d Adzuna attempts failed", attempts)
            raise

    # AsyncRetrying either returns above or re-raises; kept as a guard.
    raise ProviderResponseError(
        f"Failed to fetch jobs from Adzuna after {attempts} attempts: {last_error}"
    )
