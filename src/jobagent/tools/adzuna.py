# src/jobagent/tools/adzuna.py
"""
Adzuna job search tool.

Searches for jobs with the Adzuna Job Search API and returns them with
action "display" for temporary viewing. The agent has to save jobs explicitly;
nothing is persisted here.

search_adzuna_jobs() never raises: every failure comes back as an
{"action": "error", ...} envelope.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import httpx

from jobagent.clients.adzuna import Sleep, adzuna_search
from jobagent.error_handler import convert_exception_to_result
from jobagent.errors import InvalidRequestError
from jobagent.models import SearchArguments, SearchResult
from jobagent.pipeline.normalize import normalize_adzuna
from jobagent.settings import AdzunaSettings

logger = logging.getLogger(__name__)

TOOL_NAME = "search_adzuna_jobs"

MIN_RESULTS = 1
MAX_RESULTS = 50
DEFAULT_RESULTS = 20

ALL_LOCATIONS = "all locations"

TOOL_DESCRIPTION = (
    "Search for jobs using the Adzuna job search API. Returns jobs from multiple "
    "companies and job boards. Use this for broad job searches or when the user "
    "doesn't specify particular companies. Results are displayed temporarily and "
    "must be explicitly saved by the user."
)

INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "Job search query (e.g., 'AI engineer', 'product manager fintech', "
            "'senior software engineer')",
        },
        "location": {
            "type": "string",
            "description": "Location filter (e.g., 'San Francisco', 'Remote', 'United States'). "
            "Leave empty for all locations.",
        },
        "resultsCount": {
            "type": "integer",
            "minimum": MIN_RESULTS,
            "maximum": MAX_RESULTS,
            "default": DEFAULT_RESULTS,
            "description": "Number of results to return (max 50, default 20)",
        },
    },
    "required": ["query"],
    "additionalProperties": False,
}

TOOL_SPEC = {
    "name": TOOL_NAME,
    "description": TOOL_DESCRIPTION,
    "input_schema": INPUT_SCHEMA,
}


def clamp_results_count(value: Any) -> int:
    """Bound the page size to [1, 50]; None means the default of 20."""
    if value is None:
        return DEFAULT_RESULTS
    if isinstance(value, bool):
        raise InvalidRequestError(f"resultsCount must be an integer, got {value!r}")
    try:
        count = int(value)
    except OverflowError:
        # infinities
        count = MAX_RESULTS if value > 0 else MIN_RESULTS
    except (TypeError, ValueError):
        raise InvalidRequestError(f"resultsCount must be an integer, got {value!r}") from None
    return max(MIN_RESULTS, min(MAX_RESULTS, count))


def _display_result(jobs: list, query: str, location: Optional[str]) -> SearchResult:
    message = f'Found {len(jobs)} jobs matching "{query}"'
    if location:
        message += f" in {location}"
    return {
        "action": "display",
        "jobs": jobs,
        "count": len(jobs),
        "query": query,
        "location": location or ALL_LOCATIONS,
        "message": message,
    }


async def search_adzuna_jobs(
    query: str,
    location: Optional[str] = None,
    results_count: Any = DEFAULT_RESULTS,
    *,
    settings: Optional[AdzunaSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    sleep: Sleep = asyncio.sleep,
) -> SearchResult:
    """
    Search Adzuna and return a display/error envelope.

    `settings` defaults to AdzunaSettings.from_env(); `transport` and `sleep`
    are passed through to the client (tests swap both out).
    """
    logger.info("Adzuna tool called with query: %r", query)

    try:
        if not isinstance(query, str) or not query.strip():
            raise InvalidRequestError("A search query is required")
        count = clamp_results_count(results_count)
        location = location or None

        if settings is None:
            settings = AdzunaSettings.from_env()

        raw = await adzuna_search(
            settings,
            query,
            results_per_page=count,
            where=location,
            transport=transport,
            sleep=sleep,
        )
        jobs = normalize_adzuna(raw)
    except Exception as exc:
        return convert_exception_to_result(exc)

    return _display_result(jobs, query, location)


async def call_tool(arguments: SearchArguments, **kwargs: Any) -> SearchResult:
    """
    Entry point for the agent's tool router.

    Takes the wire arguments ({"query", "location", "resultsCount"}) and
    forwards any keyword overrides (settings, transport, sleep).
    """
    return await search_adzuna_jobs(
        arguments.get("query", ""),
        arguments.get("location"),
        arguments.get("resultsCount", DEFAULT_RESULTS),
        **kwargs,
    )
