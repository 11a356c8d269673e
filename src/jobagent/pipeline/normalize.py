# src/jobagent/pipeline/normalize.py
"""
Convert Adzuna's raw API response into our canonical Job records.

Pure functions: no I/O, no retries. They assume the provider JSON is well
formed; a response without a results list is rejected earlier by the client.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from jobagent.models import AdzunaJob, AdzunaResponse, Job

SOURCE_NAME = "adzuna"

REQ_DEGREE = "Bachelor's degree or equivalent experience"
REQ_EXPERIENCE = "Relevant professional experience"


def _now_iso() -> str:
    # "2025-09-26T07:20:13.123Z"
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _money(amount: float) -> str:
    # Adzuna sends floats; 80000.0 should read "80,000"
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    elif isinstance(amount, float):
        amount = round(amount, 3)
    return f"{amount:,}"


def format_salary(salary_min: Optional[float], salary_max: Optional[float]) -> Optional[str]:
    """
    "$80,000 - $120,000" when both bounds are known, "$80,000+" with only a
    minimum, None otherwise (a zero bound counts as unknown).
    """
    if salary_min and salary_max:
        return f"${_money(salary_min)} - ${_money(salary_max)}"
    if salary_min:
        return f"${_money(salary_min)}+"
    return None


def extract_requirements(description: str) -> List[str]:
    """Keyword heuristic over the description; at most the two fixed strings."""
    requirements: List[str] = []
    desc_lower = (description or "").lower()

    if "bachelor" in desc_lower or "degree" in desc_lower:
        requirements.append(REQ_DEGREE)
    if "experience" in desc_lower:
        requirements.append(REQ_EXPERIENCE)
    return requirements


def map_adzuna_job(adzuna_job: AdzunaJob) -> Job:
    """
    Map one Adzuna result to a Job.

    The Adzuna id is dropped on purpose: ids are namespaced per provider and
    the agent mixes jobs from several sources, so each record gets a uuid4.
    """
    job: Job = {
        "id": str(uuid.uuid4()),
        "title": adzuna_job["title"],
        "company": adzuna_job["company"]["display_name"],
        "location": adzuna_job["location"]["display_name"],
        "description": adzuna_job["description"],
        "requirements": extract_requirements(adzuna_job["description"]),
        "url": adzuna_job["redirect_url"],
        "source": SOURCE_NAME,
        "discovered_at": _now_iso(),
    }

    salary = format_salary(adzuna_job.get("salary_min"), adzuna_job.get("salary_max"))
    if salary is not None:
        job["salary"] = salary
    return job


def normalize_adzuna(results_json: AdzunaResponse) -> List[Job]:
    """Map every entry of Adzuna's "results" array, preserving order."""
    return [map_adzuna_job(x) for x in results_json.get("results", [])]
