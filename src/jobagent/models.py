# src/jobagent/models.py
"""
Typed dictionaries for everything that crosses the tool boundary.

- AdzunaJob / AdzunaResponse: the provider's JSON, as it arrives.
- Job: our canonical, source-agnostic job record.
- SearchResult: the envelope handed back to the agent.

At runtime these are plain dicts; the TypedDicts only document the keys.
"""

from typing import List, Optional, TypedDict


class AdzunaCompany(TypedDict):
    display_name: str


class AdzunaLocation(TypedDict, total=False):
    display_name: str
    area: List[str]


class AdzunaCategory(TypedDict):
    label: str


class _AdzunaJobRequired(TypedDict):
    id: str
    title: str
    company: AdzunaCompany
    location: AdzunaLocation
    description: str
    redirect_url: str


class AdzunaJob(_AdzunaJobRequired, total=False):
    """One entry of Adzuna's "results" array."""

    salary_min: float
    salary_max: float
    category: AdzunaCategory
    contract_type: str

    # e.g. "2025-09-26T07:20:13Z"
    created: str


class _AdzunaResponseRequired(TypedDict):
    results: List[AdzunaJob]


class AdzunaResponse(_AdzunaResponseRequired, total=False):
    count: int
    mean: float


class _JobRequired(TypedDict):
    # Freshly generated; Adzuna's own id is not kept
    id: str
    title: str
    company: str
    location: str
    description: str
    requirements: List[str]
    url: str

    # Always "adzuna" for jobs produced here
    source: str

    # ISO 8601, time the record was built
    discovered_at: str


class Job(_JobRequired, total=False):
    """
    Canonical job record shared with the rest of the agent.
    `salary` is only present when the provider reported a minimum.
    """

    salary: str


class _SearchResultRequired(TypedDict):
    # "display" or "error"
    action: str
    jobs: List[Job]


class SearchResult(_SearchResultRequired, total=False):
    """
    Result envelope.

    action == "error":   error is set, jobs is empty.
    action == "display": count, query, location and message are set,
                         and count == len(jobs).
    """

    count: int
    query: str
    location: str
    message: str
    error: str


class SearchArguments(TypedDict, total=False):
    """Arguments as the tool router sends them (wire names)."""

    query: str
    location: Optional[str]
    resultsCount: int
