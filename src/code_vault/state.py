"""Application state for one explorer session."""

from typing import Optional

from pydantic import BaseModel, Field

from code_vault.analysis.filters import ALL_LANGUAGES, filter_repositories
from code_vault.analysis.languages import compute_language_stats, unique_languages
from code_vault.errors import GitHubDataError
from code_vault.models import ErrorKind, LanguageStat, Repository, UserData, UserProfile


class ExplorerState(BaseModel):
    """Everything the explorer screen shows, changed only through transitions.

    Each search gets a generation number. Results and failures carry the
    number they were issued with and are dropped if a newer search started
    in the meantime.
    """

    username: str = ""
    profile: Optional[UserProfile] = None
    repositories: list[Repository] = Field(default_factory=list)
    search_term: str = ""
    selected_language: str = ALL_LANGUAGES
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    loading: bool = False
    generation: int = 0
    dark_mode: bool = True

    # ── Transitions ───────────────────────────────────────────────────────

    def begin_search(self, username: str) -> Optional[int]:
        """Start a search; return its generation, or None for blank input."""
        username = username.strip()
        if not username:
            return None
        self.generation += 1
        self.username = username
        self.loading = True
        self.error = None
        self.error_kind = None
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    def complete(self, token: int, data: UserData) -> bool:
        if not self.is_current(token):
            return False
        self.profile = data.profile
        self.repositories = list(data.repositories)
        self.loading = False
        if (
            self.selected_language != ALL_LANGUAGES
            and self.selected_language not in self.available_languages
        ):
            self.selected_language = ALL_LANGUAGES
        return True

    def fail(self, token: int, error: GitHubDataError) -> bool:
        if not self.is_current(token):
            return False
        self.error = error.message
        self.error_kind = error.kind
        self.loading = False
        return True

    def set_search_term(self, term: str) -> None:
        self.search_term = term

    def set_language(self, language: str) -> None:
        self.selected_language = language or ALL_LANGUAGES

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    # ── Derived views ─────────────────────────────────────────────────────

    @property
    def visible_repositories(self) -> list[Repository]:
        return filter_repositories(
            self.repositories, self.search_term, self.selected_language
        )

    @property
    def language_stats(self) -> list[LanguageStat]:
        return compute_language_stats(self.repositories)

    @property
    def available_languages(self) -> list[str]:
        return unique_languages(self.repositories)

    @property
    def status(self) -> str:
        """``idle``, ``loading``, ``error`` or ``populated``."""
        if self.loading:
            return "loading"
        if self.error:
            return "error"
        if self.profile is not None:
            return "populated"
        return "idle"
