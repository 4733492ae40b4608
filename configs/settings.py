from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Central configuration for Oscarbot.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties. Components receive a Settings
    instance at construction time rather than reading the module global.
    """

    def __init__(self) -> None:
        # GitHub API / service credentials
        self._github_api_url = os.getenv(
            "GITHUB_API_URL", "https://api.github.com"
        ).rstrip("/")
        self._github_username = os.getenv("GITHUB_USERNAME") or None
        self._github_password = os.getenv("GITHUB_PASSWORD") or None
        self._github_token = os.getenv("GITHUB_TOKEN") or None
        self._http_timeout = float(os.getenv("OSCARBOT_HTTP_TIMEOUT", "10"))

        # Runtime data (sessions + event log)
        self._runtime_data_dir = Path(
            os.getenv("OSCARBOT_RUNTIME_DATA_DIR", "runtime/data")
        )

        # Slot input normalization
        self._strip_question_mark = _env_flag("OSCARBOT_STRIP_QUESTION_MARK")

    # ------------------------------------------------------------------
    # GitHub settings
    # ------------------------------------------------------------------

    @property
    def github_api_url(self) -> str:
        return self._github_api_url

    @property
    def github_username(self) -> str:
        if not self._github_username and not self._github_token:
            raise RuntimeError(
                "GITHUB_USERNAME is not set. Please export it in your environment "
                "or define it in a .env file."
            )
        return self._github_username or ""

    @property
    def github_password(self) -> str:
        if not self._github_password and not self._github_token:
            raise RuntimeError(
                "Neither GITHUB_PASSWORD nor GITHUB_TOKEN is set. Please export one "
                "of them in your environment or define it in a .env file."
            )
        return self._github_password or ""

    @property
    def github_token(self) -> Optional[str]:
        return self._github_token

    @property
    def http_timeout(self) -> float:
        return self._http_timeout

    # ------------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------------

    @property
    def runtime_data_dir(self) -> Path:
        return self._runtime_data_dir

    @property
    def strip_question_mark(self) -> bool:
        return self._strip_question_mark


settings = Settings()
