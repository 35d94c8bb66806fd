"""Code Vault exception classes."""

from code_vault.models import ErrorKind


class CodeVaultError(Exception):
    """Base exception for all Code Vault errors."""


class GitHubDataError(CodeVaultError):
    """A user lookup failed in a way the UI reports to the user."""

    kind: ErrorKind

    def __init__(self, username: str, message: str) -> None:
        self.username = username
        self.message = message
        super().__init__(message)


class UserNotFoundError(GitHubDataError):
    """Raised when GitHub answers 404 for the requested user."""

    kind = ErrorKind.not_found

    def __init__(self, username: str) -> None:
        super().__init__(
            username,
            "GitHub user not found. Please check the username and try again.",
        )


class NetworkOrCorsError(GitHubDataError):
    """Raised when every relay and the direct request failed."""

    kind = ErrorKind.network_or_cors

    def __init__(self, username: str) -> None:
        super().__init__(
            username,
            "Unable to fetch data from GitHub. Every CORS relay and the direct "
            "request failed; check your connection or configure different "
            "relays with CODE_VAULT_PROXIES.",
        )


class StrategyFailed(CodeVaultError):
    """One fetch strategy failed; the next one should be tried."""

    def __init__(self, strategy: str, reason: str) -> None:
        self.strategy = strategy
        self.reason = reason
        super().__init__(f"{strategy}: {reason}")
