"""Tools exposed to the job-search agent."""

from .adzuna import TOOL_SPEC, call_tool, search_adzuna_jobs

__all__ = ["TOOL_SPEC", "call_tool", "search_adzuna_jobs"]
