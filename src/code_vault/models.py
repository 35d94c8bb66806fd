"""Data models for code-vault."""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# ── Raw GitHub data ───────────────────────────────────────────────────────

class UserProfile(BaseModel):
    """A GitHub user as returned by ``/users/{login}``."""

    login: str
    name: Optional[str] = None
    avatar_url: str = ""
    html_url: str = ""
    bio: Optional[str] = None
    location: Optional[str] = None
    blog: Optional[str] = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    created_at: datetime

    @field_validator("name", "bio", "location", "blog", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("followers", "following", "public_repos", mode="before")
    @classmethod
    def _null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("avatar_url", "html_url", mode="before")
    @classmethod
    def _null_link_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def display_name(self) -> str:
        return self.name or self.login

    @property
    def blog_url(self) -> Optional[str]:
        """Blog link, with a scheme added when the user left it off."""
        if not self.blog:
            return None
        if self.blog.startswith("http"):
            return self.blog
        return f"https://{self.blog}"

    @property
    def joined_year(self) -> int:
        return self.created_at.year

    @classmethod
    def from_api(cls, item: Any) -> "UserProfile":
        """Validate a raw payload; extra keys are ignored."""
        return cls.model_validate(item)


class Repository(BaseModel):
    """A public repository owned by the looked-up user."""

    id: int
    name: str
    full_name: str = ""
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    html_url: str = ""
    updated_at: Optional[datetime] = None

    @field_validator("description", "language", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value:
            return None
        return value

    @field_validator("stargazers_count", "forks_count", mode="before")
    @classmethod
    def _null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("full_name", "html_url", mode="before")
    @classmethod
    def _null_link_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_api(cls, item: Any) -> "Repository":
        return cls.model_validate(item)


class UserData(BaseModel):
    """Profile and repositories fetched together by one strategy."""

    profile: UserProfile
    repositories: list[Repository] = Field(default_factory=list)


# ── Derived data ──────────────────────────────────────────────────────────

class LanguageStat(BaseModel):
    """How many repositories use one primary language."""

    name: str
    count: int = 0
    color: str


class ErrorKind(str, Enum):
    """The two failure classes a lookup can surface."""

    not_found = "not_found"
    network_or_cors = "network_or_cors"
