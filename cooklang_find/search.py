"""Full-text search over recipe files, ranked by relevance."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from cooklang_find.recipe import Recipe, RecipeError

__all__ = [
    "SearchError",
    "SearchResult",
    "count_matches",
    "score_content_matches",
    "score_filename_match",
    "search",
    "search_paths",
    "sort_results",
]

EXACT_NAME_SCORE = 20.0
PARTIAL_NAME_SCORE = 10.0
CONTENT_BASE_SCORE = 1.0
CONTENT_MATCH_SCORE = 0.1
CONTENT_BONUS_CAP = 5.0


class SearchError(Exception):
    """A search could not be completed."""


@dataclass
class SearchResult:
    """A candidate path with its relevance score."""

    path: Path
    score: float = 0.0

    def add_score(self, points: float) -> None:
        """Increase the score by ``points``."""
        self.score += points


def search(base_dir: str | os.PathLike[str], query: str) -> list[Recipe]:
    """Return recipes under ``base_dir`` matching ``query``, best first."""
    recipes = []
    for path in search_paths(base_dir, query):
        try:
            recipes.append(Recipe(path))
        except RecipeError as exc:
            raise SearchError(f"Failed to process recipe: {exc}") from exc
    return recipes


def search_paths(base_dir: str | os.PathLike[str], query: str) -> list[Path]:
    """Return paths of ``.cook`` files under ``base_dir`` ranked by relevance.

    The file name is scored against the whole query, the content against
    each whitespace-separated term. Files scoring zero are left out.
    """
    query_lower = query.lower()
    terms = query_lower.split()

    results = []
    for path in sorted(Path(base_dir).glob("**/*.cook")):
        result = SearchResult(path)
        result.add_score(score_filename_match(path, query_lower))
        try:
            result.add_score(score_content_matches(path, terms))
        except OSError:
            pass
        if result.score > 0.0:
            results.append(result)

    sort_results(results)
    return [result.path for result in results]


def score_filename_match(path: str | os.PathLike[str], query: str) -> float:
    """Score how well the file stem matches the query, case-insensitively."""
    name = Path(path).stem.lower()
    query = query.lower()
    if name == query:
        return EXACT_NAME_SCORE
    if query in name:
        return PARTIAL_NAME_SCORE
    return 0.0


def score_content_matches(
    path: str | os.PathLike[str], terms: Iterable[str]
) -> float:
    """Score the file by how often the terms occur in it.

    Raises OSError if the file cannot be read.
    """
    matches = count_matches(path, terms)
    if matches == 0:
        return 0.0
    return CONTENT_BASE_SCORE + min(CONTENT_MATCH_SCORE * matches, CONTENT_BONUS_CAP)


def count_matches(path: str | os.PathLike[str], terms: Iterable[str]) -> int:
    """Count non-overlapping occurrences of the terms, line by line.

    Lines are compared in lower case. Raises OSError if the file cannot be
    read as UTF-8 text.
    """
    terms = list(terms)
    try:
        with open(path, encoding="utf-8") as handle:
            return sum(
                line.rstrip("\n").lower().count(term)
                for line in handle
                for term in terms
            )
    except UnicodeDecodeError as exc:
        raise OSError(f"Failed to read file {path}: {exc}") from exc


def sort_results(results: list[SearchResult]) -> None:
    """Sort in place: highest score first, ties by lower-case file stem."""
    results.sort(key=lambda result: (-result.score, result.path.stem.lower()))