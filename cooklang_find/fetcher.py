"""Look up recipes by name across a list of base directories."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from cooklang_find.recipe import Recipe, RecipeError

__all__ = ["FetchError", "get_recipe"]


class FetchError(Exception):
    """A recipe was found but could not be loaded."""


def get_recipe(
    base_dirs: Iterable[str | os.PathLike[str]], name: str | os.PathLike[str]
) -> Recipe | None:
    """Find the recipe called ``name`` in the first base directory holding it.

    Only ``<base_dir>/<name>.cook`` is considered; subdirectories are not
    searched. Returns None when no directory holds the recipe.
    """
    file_name = f"{os.fspath(name)}.cook"
    for base_dir in base_dirs:
        recipe_path = Path(base_dir) / file_name
        if recipe_path.exists():
            try:
                return Recipe(recipe_path)
            except RecipeError as exc:
                raise FetchError(f"Failed to parse recipe: {exc}") from exc
    return None