"""Explorer screen — username lookup, profile, language tally and repo list."""

from typing import Optional

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    LoadingIndicator,
    Select,
    Static,
)

from code_vault.analysis.filters import ALL_LANGUAGES
from code_vault.explorer import Explorer
from code_vault.models import ErrorKind, UserProfile
from code_vault.state import ExplorerState

SHARE_BAR_WIDTH = 20


class ExplorerScreen(Screen):
    """Single-page view over an ExplorerState."""

    BINDINGS = [
        ("ctrl+o", "open_profile", "Open profile"),
    ]

    CSS = """
    #lookup-row {
        height: auto;
        padding: 1 2;
    }
    #username-input {
        width: 1fr;
    }
    #explore-btn {
        margin-left: 1;
    }
    #error-label {
        color: $error;
        padding: 0 2;
    }
    #loading {
        height: 3;
    }
    #profile-card {
        border: round $primary;
        padding: 1 2;
        margin: 0 1;
        height: auto;
        background: $surface;
    }
    .section-title {
        text-style: bold;
        margin: 1 1 0 1;
        color: $secondary;
    }
    #language-table {
        height: auto;
        max-height: 12;
        margin: 0 1;
    }
    #filter-row {
        height: auto;
        margin: 1 1 0 1;
    }
    #search-input {
        width: 2fr;
    }
    #language-select {
        width: 1fr;
        margin-left: 1;
    }
    #repo-count {
        margin: 0 1;
        color: $text-muted;
    }
    #repo-table {
        height: auto;
        margin: 0 1 1 1;
    }
    """

    def __init__(
        self,
        explorer: Explorer,
        initial_username: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.explorer = explorer
        self.explorer.on_change = self.refresh_view
        self._initial_username = initial_username
        self._languages: list[str] = []

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="lookup-row"):
            yield Input(placeholder="GitHub username, e.g. torvalds", id="username-input")
            yield Button("Explore", id="explore-btn", variant="primary")
        yield Label("", id="error-label")
        yield LoadingIndicator(id="loading")
        with VerticalScroll(id="results"):
            yield Static("", id="profile-card", markup=False)
            yield Static("LANGUAGES", classes="section-title")
            yield DataTable(id="language-table", cursor_type="none")
            yield Static("REPOSITORIES", classes="section-title")
            with Horizontal(id="filter-row"):
                yield Input(placeholder="Search repositories…", id="search-input")
                yield Select(
                    [("All languages", ALL_LANGUAGES)],
                    value=ALL_LANGUAGES,
                    allow_blank=False,
                    id="language-select",
                )
            yield Label("", id="repo-count")
            yield DataTable(id="repo-table", cursor_type="row", zebra_stripes=True)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#language-table", DataTable).add_columns(
            "", "Language", "Repos", "Share",
        )
        self.query_one("#repo-table", DataTable).add_columns(
            "Name", "Language", "★ Stars", "⑂ Forks", "Description",
        )
        self.refresh_view(self.explorer.state)
        username_input = self.query_one("#username-input", Input)
        username_input.focus()
        if self._initial_username:
            username_input.value = self._initial_username
            self.start_search()

    # ── Events ────────────────────────────────────────────────────────────

    @on(Button.Pressed, "#explore-btn")
    def start_search(self) -> None:
        username = self.query_one("#username-input", Input).value
        if not username.strip():
            return
        self.run_worker(self.explorer.search(username), group="search")

    @on(Input.Submitted, "#username-input")
    def submit_on_enter(self) -> None:
        self.start_search()

    @on(Input.Changed, "#search-input")
    def search_changed(self, event: Input.Changed) -> None:
        self.explorer.set_search_term(event.value)

    @on(Select.Changed, "#language-select")
    def language_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        if event.value != self.explorer.state.selected_language:
            self.explorer.set_language(str(event.value))

    @on(DataTable.RowSelected, "#repo-table")
    def open_repository(self, event: DataTable.RowSelected) -> None:
        """Open the selected repository on GitHub."""
        repo_id = int(event.row_key.value)
        for repo in self.explorer.state.repositories:
            if repo.id == repo_id and repo.html_url:
                self.app.open_url(repo.html_url)
                return

    def action_open_profile(self) -> None:
        profile = self.explorer.state.profile
        if profile is not None:
            self.app.open_url(profile.html_url or f"https://github.com/{profile.login}")

    # ── Rendering ─────────────────────────────────────────────────────────

    def refresh_view(self, state: ExplorerState) -> None:
        """Redraw every widget from ``state``."""
        self.query_one("#loading", LoadingIndicator).display = state.loading
        self._render_error(state)
        self.query_one("#results").display = state.profile is not None
        if state.profile is None:
            return
        self.query_one("#profile-card", Static).update(_profile_text(state.profile))
        self._render_languages(state)
        self._render_language_options(state)
        self._render_repositories(state)

    def _render_error(self, state: ExplorerState) -> None:
        label = self.query_one("#error-label", Label)
        if not state.error:
            label.update("")
            return
        prefix = "❌" if state.error_kind is ErrorKind.not_found else "⚠"
        label.update(Text(f"{prefix}  {state.error}"))

    def _render_languages(self, state: ExplorerState) -> None:
        table = self.query_one("#language-table", DataTable)
        table.clear()
        stats = state.language_stats
        total = sum(s.count for s in stats) or 1
        for s in stats:
            bar = "█" * max(1, round(s.count / total * SHARE_BAR_WIDTH))
            table.add_row(
                Text("●", style=s.color),
                s.name,
                str(s.count),
                Text(bar, style=s.color),
            )

    def _render_language_options(self, state: ExplorerState) -> None:
        languages = state.available_languages
        if languages == self._languages:
            return
        self._languages = languages
        select = self.query_one("#language-select", Select)
        select.set_options(
            [("All languages", ALL_LANGUAGES)] + [(lang, lang) for lang in languages]
        )
        select.value = state.selected_language

    def _render_repositories(self, state: ExplorerState) -> None:
        table = self.query_one("#repo-table", DataTable)
        table.clear()
        visible = state.visible_repositories
        for repo in visible:
            table.add_row(
                Text(repo.name, style="bold"),
                Text(repo.language or "—"),
                str(repo.stargazers_count),
                str(repo.forks_count),
                Text(repo.description or "No description available"),
                key=str(repo.id),
            )
        noun = "repository" if len(visible) == 1 else "repositories"
        self.query_one("#repo-count", Label).update(f"{len(visible)} {noun}")


def _profile_text(profile: UserProfile) -> str:
    lines = [f"{profile.display_name}  (@{profile.login})"]
    if profile.bio:
        lines.append(profile.bio)
    details = []
    if profile.location:
        details.append(f"📍 {profile.location}")
    if profile.blog_url:
        details.append(f"🔗 {profile.blog_url}")
    if details:
        lines.append("   ".join(details))
    lines.append(
        f"Followers {profile.followers:,}  ·  Repositories {profile.public_repos:,}"
        f"  ·  Following {profile.following:,}  ·  Joined {profile.joined_year}"
    )
    return "\n".join(lines)
