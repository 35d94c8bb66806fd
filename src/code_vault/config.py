"""Runtime settings, read from the environment (and ``.env`` via the CLI)."""

import os
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_PROXIES = [
    "https://corsproxy.io/?",
    "https://cors-anywhere.herokuapp.com/",
    "https://api.allorigins.win/raw?url=",
]


class Settings(BaseModel):
    """Fetcher and logging configuration."""

    proxies: list[str] = Field(default_factory=lambda: list(DEFAULT_PROXIES))
    api_base: str = "https://api.github.com"
    per_page: int = 100
    timeout: float = 30.0
    token: Optional[str] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``CODE_VAULT_*`` and GitHub token variables."""
        values: dict = {}
        proxies = os.environ.get("CODE_VAULT_PROXIES")
        if proxies is not None:
            values["proxies"] = [p.strip() for p in proxies.split(",") if p.strip()]
        if os.environ.get("CODE_VAULT_API_BASE"):
            values["api_base"] = os.environ["CODE_VAULT_API_BASE"].rstrip("/")
        if os.environ.get("CODE_VAULT_TIMEOUT"):
            values["timeout"] = float(os.environ["CODE_VAULT_TIMEOUT"])
        if os.environ.get("CODE_VAULT_LOG_LEVEL"):
            values["log_level"] = os.environ["CODE_VAULT_LOG_LEVEL"].upper()
        values["token"] = (
            os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN") or None
        )
        return cls(**values)
