"""Search orchestration — runs a lookup and applies it to the explorer state."""

import logging
from typing import Callable, Optional

from code_vault.errors import GitHubDataError
from code_vault.fetcher import GitHubFetcher
from code_vault.state import ExplorerState

logger = logging.getLogger(__name__)


class Explorer:
    """Ties a GitHubFetcher to an ExplorerState."""

    def __init__(
        self,
        fetcher: Optional[GitHubFetcher] = None,
        state: Optional[ExplorerState] = None,
        on_change: Optional[Callable[[ExplorerState], None]] = None,
    ) -> None:
        self.fetcher = fetcher or GitHubFetcher()
        self.state = state or ExplorerState()
        self.on_change = on_change or (lambda _: None)

    def _changed(self) -> None:
        self.on_change(self.state)

    async def search(self, username: str) -> bool:
        """Look up ``username``. Returns True if the outcome was applied."""
        username = username.strip()
        token = self.state.begin_search(username)
        if token is None:
            return False
        self._changed()

        try:
            data = await self.fetcher.fetch_user_data(username)
        except GitHubDataError as e:
            applied = self.state.fail(token, e)
        else:
            applied = self.state.complete(token, data)

        if not applied:
            logger.debug("Discarded superseded result for search #%d", token)
            return False
        self._changed()
        return True

    def set_search_term(self, term: str) -> None:
        self.state.set_search_term(term)
        self._changed()

    def set_language(self, language: str) -> None:
        self.state.set_language(language)
        self._changed()

    async def close(self) -> None:
        await self.fetcher.close()
