# src/jobagent/cli.py
"""
Command-line interface for the Adzuna tool.

This module provides CLI commands to:
- Run a search exactly as the agent would and print the result envelope
- Print the tool description/input schema handed to the agent's tool router
"""

from dotenv import load_dotenv
load_dotenv()  # looks for a .env file in the project root

import asyncio
import json
import os
from typing import Optional

import typer

from jobagent.tools.adzuna import DEFAULT_RESULTS, TOOL_SPEC, search_adzuna_jobs
from jobagent.utils.logging import setup_logger

# Typer app instance for CLI commands
app = typer.Typer(help="Adzuna job search tool")


@app.command()
def search(
    query: str,
    location: Optional[str] = typer.Option(None, "--location", "-l", help="Location filter; omit for all locations"),
    limit: int = typer.Option(DEFAULT_RESULTS, "--limit", "-n", help="Number of results (clamped to 1-50)"),
    log_level: str = typer.Option(os.getenv("LOG_LEVEL", "WARNING"), "--log-level", help="Logging level"),
):
    """
    Search Adzuna and print the {"action": ...} envelope as JSON.
    Exits with status 1 when the search failed.
    """
    setup_logger(log_level)

    result = asyncio.run(search_adzuna_jobs(query, location, limit))
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))

    if result["action"] == "error":
        raise typer.Exit(code=1)


@app.command()
def tool_schema():
    """
    Print the tool name, description and JSON input schema.
    """
    typer.echo(json.dumps(TOOL_SPEC, indent=2))


if __name__ == "__main__":
    app()
