"""CLI entry point for code-vault."""

import sys


def main() -> None:
    """Launch the Code Vault TUI, optionally looking up ``argv[1]`` at start."""
    from dotenv import load_dotenv

    load_dotenv()  # Load .env file (e.g. GITHUB_TOKEN, CODE_VAULT_PROXIES)

    from code_vault.app import CodeVaultApp
    from code_vault.config import Settings
    from code_vault.logging import configure_logging

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    username = sys.argv[1] if len(sys.argv) > 1 else None
    app = CodeVaultApp(settings=settings, username=username)
    app.run()


if __name__ == "__main__":
    main()
