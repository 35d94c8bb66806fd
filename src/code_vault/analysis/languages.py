"""Language tally — deterministic stats from a repository list."""

from code_vault.models import LanguageStat, Repository

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f7df1e",
    "TypeScript": "#3178c6",
    "Python": "#3776ab",
    "Java": "#ed8b00",
    "C++": "#00599c",
    "C": "#555555",
    "HTML": "#e34c26",
    "CSS": "#1572b6",
    "React": "#61dafb",
    "Vue": "#4fc08d",
    "Go": "#00add8",
    "Rust": "#dea584",
    "PHP": "#777bb4",
    "Ruby": "#cc342d",
    "Swift": "#fa7343",
    "Kotlin": "#7f52ff",
    "Dart": "#0175c2",
    "Shell": "#89e051",
}

DEFAULT_LANGUAGE_COLOR = "#64748b"


def language_color(name: str) -> str:
    return LANGUAGE_COLORS.get(name, DEFAULT_LANGUAGE_COLOR)


def compute_language_stats(
    repositories: list[Repository], limit: int = 8
) -> list[LanguageStat]:
    """Count repositories per primary language, highest first.

    Repositories without a detected language are skipped. Ties keep the
    order in which the languages were first seen.
    """
    counts: dict[str, int] = {}
    for repo in repositories:
        if not repo.language:
            continue
        counts[repo.language] = counts.get(repo.language, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ranked = sorted(counts.items(), key=lambda x: -x[1])[:limit]
    return [
        LanguageStat(name=name, count=count, color=language_color(name))
        for name, count in ranked
    ]


def unique_languages(repositories: list[Repository]) -> list[str]:
    """Distinct primary languages in first-seen order."""
    seen: list[str] = []
    for repo in repositories:
        if repo.language and repo.language not in seen:
            seen.append(repo.language)
    return seen
