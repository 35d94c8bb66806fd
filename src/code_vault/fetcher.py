"""GitHub user/repository fetching through CORS relays, then directly."""

import logging
from abc import ABC, abstractmethod
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from code_vault.config import Settings
from code_vault.errors import NetworkOrCorsError, StrategyFailed, UserNotFoundError
from code_vault.models import Repository, UserData, UserProfile

logger = logging.getLogger(__name__)


# ── Strategies ────────────────────────────────────────────────────────────

class FetchStrategy(ABC):
    """One rung of the retry ladder: turns a GitHub API URL into a request."""

    name = "strategy"

    @abstractmethod
    def url_for(self, target: str) -> str:
        """URL to request in place of ``target``."""

    def headers(self) -> dict[str, str]:
        return {}


class ProxyStrategy(FetchStrategy):
    """Route the request through a CORS relay by URL prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self.name = f"proxy {prefix}"

    def url_for(self, target: str) -> str:
        return self.prefix + quote(target, safe="")


class DirectStrategy(FetchStrategy):
    """Call the GitHub API without a relay."""

    name = "direct"

    def __init__(self, token: Optional[str] = None) -> None:
        self.token = token

    def url_for(self, target: str) -> str:
        return target

    def headers(self) -> dict[str, str]:
        h: dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h


# ── Fetcher ───────────────────────────────────────────────────────────────

class GitHubFetcher:
    """Fetches a user's profile and repositories, trying each strategy in turn."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = client is None
        self.strategies: list[FetchStrategy] = [
            ProxyStrategy(prefix) for prefix in self.settings.proxies
        ]
        self.strategies.append(DirectStrategy(token=self.settings.token))

    # ── HTTP plumbing ─────────────────────────────────────────────────────

    def _client_instance(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.timeout,
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GitHubFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def profile_url(self, username: str) -> str:
        return f"{self.settings.api_base}/users/{quote(username, safe='')}"

    def repos_url(self, username: str) -> str:
        return (
            f"{self.settings.api_base}/users/{quote(username, safe='')}/repos"
            f"?sort=updated&per_page={self.settings.per_page}"
        )

    async def _get_json(
        self, strategy: FetchStrategy, target: str
    ) -> tuple[int, object]:
        """GET ``target`` through ``strategy``; return (status, decoded body)."""
        url = strategy.url_for(target)
        logger.debug("GET %s via %s", url, strategy.name)
        client = self._client_instance()
        try:
            resp = await client.get(url, headers=strategy.headers())
        except httpx.HTTPError as e:
            raise StrategyFailed(strategy.name, f"transport error: {e!r}") from e
        if not resp.is_success:
            return resp.status_code, None
        try:
            return resp.status_code, resp.json()
        except ValueError as e:
            raise StrategyFailed(strategy.name, "response was not JSON") from e

    # ── Lookup ────────────────────────────────────────────────────────────

    async def _attempt(self, strategy: FetchStrategy, username: str) -> UserData:
        """Fetch both halves through one strategy, or fail as a whole."""
        status, payload = await self._get_json(strategy, self.profile_url(username))
        if status == 404:
            raise UserNotFoundError(username)
        if payload is None:
            raise StrategyFailed(strategy.name, f"profile request returned {status}")
        if not isinstance(payload, dict) or "login" not in payload:
            raise StrategyFailed(strategy.name, "unexpected profile payload")

        status, raw_repos = await self._get_json(strategy, self.repos_url(username))
        if raw_repos is None:
            raise StrategyFailed(
                strategy.name, f"repositories request returned {status}"
            )
        if not isinstance(raw_repos, list):
            raise StrategyFailed(strategy.name, "unexpected repositories payload")

        try:
            profile = UserProfile.from_api(payload)
            repositories = [
                Repository.from_api(item)
                for item in raw_repos[: self.settings.per_page]
            ]
        except ValidationError as e:
            raise StrategyFailed(strategy.name, f"malformed payload: {e}") from e
        return UserData(profile=profile, repositories=repositories)

    async def fetch_user_data(self, username: str) -> UserData:
        """Fetch ``username``'s profile and up to ``per_page`` repositories.

        Raises ``UserNotFoundError`` on the first 404 for the profile, and
        ``NetworkOrCorsError`` once every strategy has failed.
        """
        username = username.strip()
        if not username:
            raise ValueError("username must not be empty")

        last_failure: Optional[StrategyFailed] = None
        for index, strategy in enumerate(self.strategies, start=1):
            try:
                data = await self._attempt(strategy, username)
            except StrategyFailed as e:
                logger.info("Strategy %d (%s) failed: %s", index, strategy.name, e.reason)
                last_failure = e
                continue
            logger.debug(
                "Fetched %s with %d repositories via %s",
                username, len(data.repositories), strategy.name,
            )
            return data

        logger.warning("All %d strategies failed for %s", len(self.strategies), username)
        raise NetworkOrCorsError(username) from last_failure
