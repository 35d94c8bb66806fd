"""Main Textual TUI application for code-vault."""

from typing import Optional

from textual.app import App

from code_vault.config import Settings
from code_vault.explorer import Explorer
from code_vault.fetcher import GitHubFetcher
from code_vault.screens.explorer import ExplorerScreen
from code_vault.state import ExplorerState


class CodeVaultApp(App):
    """TUI application for exploring a GitHub user's repositories."""

    TITLE = "Code Vault"
    SUB_TITLE = "Profile · Languages · Repositories"

    CSS = """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("t", "toggle_theme", "Light/Dark"),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        username: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.initial_username = username
        self.explorer = Explorer(
            fetcher=GitHubFetcher(self.settings),
            state=ExplorerState(),
        )

    def on_mount(self) -> None:
        self.push_screen(ExplorerScreen(self.explorer, self.initial_username))

    def action_toggle_theme(self) -> None:
        """Switch between the light and dark themes."""
        dark = self.explorer.state.toggle_theme()
        self.theme = "textual-dark" if dark else "textual-light"

    async def on_unmount(self) -> None:
        await self.explorer.close()
