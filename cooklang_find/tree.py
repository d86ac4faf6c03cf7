"""Directory trees of recipe files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from cooklang_find.recipe import Recipe, RecipeError

__all__ = [
    "DirectoryNotFoundError",
    "RecipeTree",
    "TreeError",
    "TreeNotADirectoryError",
    "build_tree",
]

ROOT_NAME = "root"


class TreeError(Exception):
    """A recipe tree could not be built."""


class DirectoryNotFoundError(TreeError):
    """The base directory does not exist."""


class TreeNotADirectoryError(TreeError):
    """The base path exists but is not a directory."""


@dataclass
class RecipeTree:
    """A node of the recipe tree: a directory, or a recipe when ``recipe`` is set."""

    name: str
    path: Path
    recipe: Recipe | None = None
    children: dict[str, RecipeTree] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.path = Path(self.path)


def _node_name(base_dir: Path) -> str:
    name = base_dir.name
    if not name or name == "..":
        return ROOT_NAME
    return name


def build_tree(base_dir: str | os.PathLike[str]) -> RecipeTree:
    """Build a tree of directories and recipes found under ``base_dir``.

    Directories holding no recipe, directly or further down, are left out.
    Raises DirectoryNotFoundError or TreeNotADirectoryError for a bad base
    path, and TreeError if a recipe cannot be loaded.
    """
    base_dir = Path(base_dir)
    if not base_dir.exists():
        raise DirectoryNotFoundError(f"Directory does not exist: {base_dir}")
    if not base_dir.is_dir():
        raise TreeNotADirectoryError(f"Path is not a directory: {base_dir}")

    root = RecipeTree(_node_name(base_dir), base_dir)

    for path in sorted(base_dir.glob("**/*.cook")):
        try:
            recipe = Recipe(path)
        except RecipeError as exc:
            raise TreeError(f"Failed to process recipe: {exc}") from exc

        try:
            relative = path.relative_to(base_dir)
        except ValueError as exc:
            raise TreeError(f"Failed to strip prefix from path: {path}") from exc

        current = root
        for part in relative.parent.parts:
            current = current.children.setdefault(
                part, RecipeTree(part, current.path / part)
            )
        current.children[recipe.name] = RecipeTree(recipe.name, path, recipe)

    return root