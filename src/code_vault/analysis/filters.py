"""In-memory repository filtering for the search box and language selector."""

from code_vault.models import Repository

ALL_LANGUAGES = "all"


def _matches_search(repo: Repository, needle: str) -> bool:
    if needle in repo.name.lower():
        return True
    return bool(repo.description) and needle in repo.description.lower()


def filter_repositories(
    repositories: list[Repository],
    search: str = "",
    language: str = ALL_LANGUAGES,
) -> list[Repository]:
    """Repositories whose name or description contains ``search`` (any case)
    and whose language equals ``language`` unless it is ``"all"``."""
    filtered = repositories

    if search:
        needle = search.lower()
        filtered = [r for r in filtered if _matches_search(r, needle)]

    if language != ALL_LANGUAGES:
        filtered = [r for r in filtered if r.language == language]

    return list(filtered)
