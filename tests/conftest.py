"""Pytest configuration and fixtures."""

import pytest

from code_vault.config import Settings
from code_vault.models import Repository


@pytest.fixture
def settings():
    """Settings with the stock relays and no token."""
    return Settings(token=None)


@pytest.fixture
def profile_payload():
    """A ``/users/octocat`` response body."""
    return {
        "login": "octocat",
        "name": "The Octocat",
        "avatar_url": "https://avatars.githubusercontent.com/u/583231",
        "html_url": "https://github.com/octocat",
        "bio": None,
        "location": "San Francisco",
        "blog": "github.blog",
        "followers": 12000,
        "following": 9,
        "public_repos": 8,
        "created_at": "2011-01-25T18:44:36Z",
    }


@pytest.fixture
def repos_payload():
    """A ``/users/octocat/repos`` response body."""
    return [
        {
            "id": 1,
            "name": "Hello-World",
            "full_name": "octocat/Hello-World",
            "description": "My first repository on GitHub!",
            "language": None,
            "stargazers_count": 2500,
            "forks_count": 2000,
            "html_url": "https://github.com/octocat/Hello-World",
            "updated_at": "2025-01-15T10:00:00Z",
        },
        {
            "id": 2,
            "name": "linguist",
            "full_name": "octocat/linguist",
            "description": "Language Savant.",
            "language": "Ruby",
            "stargazers_count": 100,
            "forks_count": 50,
            "html_url": "https://github.com/octocat/linguist",
            "updated_at": "2025-01-10T10:00:00Z",
        },
    ]


def make_repo(repo_id: int, name: str, language=None, description=None) -> Repository:
    return Repository(
        id=repo_id,
        name=name,
        language=language,
        description=description,
        html_url=f"https://github.com/u/{name}",
    )


@pytest.fixture
def repo_factory():
    return make_repo
