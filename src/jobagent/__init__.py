"""Adzuna job search tool for the job-search agent."""

__version__ = "0.1.0"
