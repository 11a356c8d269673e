# src/jobagent/settings.py
"""
Configuration for the Adzuna tool.

Credentials come from the environment (or a .env file). Everything else is a
fixed default on the dataclass; tests build an AdzunaSettings directly with
fake credentials instead of touching os.environ.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

APP_ID_ENV = "ADZUNA_APP_ID"
APP_KEY_ENV = "ADZUNA_APP_KEY"

DEFAULT_USER_AGENT = "jobagent/0.1 (AI job search agent)"


@dataclass(frozen=True)
class AdzunaSettings:
    app_id: str = ""
    app_key: str = ""

    # Per-attempt timeout and retry policy
    timeout_s: float = 10.0
    max_retries: int = 3
    backoff_base_s: float = 1.0

    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "AdzunaSettings":
        """
        Build settings from ADZUNA_APP_ID / ADZUNA_APP_KEY.
        Values already present in the environment win over .env entries.
        """
        if dotenv:
            load_dotenv()
        return cls(
            app_id=os.getenv(APP_ID_ENV, "").strip(),
            app_key=os.getenv(APP_KEY_ENV, "").strip(),
        )

    def missing_keys(self) -> List[str]:
        missing: List[str] = []
        if not self.app_id:
            missing.append(APP_ID_ENV)
        if not self.app_key:
            missing.append(APP_KEY_ENV)
        return missing

    @property
    def is_configured(self) -> bool:
        return not self.missing_keys()

    def __repr__(self) -> str:
        # never print the key itself
        key = "***" if self.app_key else ""
        return f"AdzunaSettings(app_id={self.app_id!r}, app_key={key!r}, timeout_s={self.timeout_s})"
