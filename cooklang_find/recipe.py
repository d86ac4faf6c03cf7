"""Recipe files on disk: lazy loading, metadata extraction and parsing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

import yaml

IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "webp")

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _FrontMatterLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps date-like scalars as plain strings."""


_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

_FRONT_MATTER = re.compile(
    r"\A\s*^---[ \t]*\r?\n(?P<yaml>.*?)^---[ \t]*(?:\r?\n|\Z)",
    re.MULTILINE | re.DOTALL,
)
_LEGACY_METADATA = re.compile(
    r"^[ \t]*>>[ \t]*(?P<key>[^:\n]+?)[ \t]*:[ \t]*(?P<value>.*?)[ \t]*$",
    re.MULTILINE,
)
_BLOCK_COMMENT = re.compile(r"\[-.*?-\]", re.DOTALL)
_LINE_COMMENT = re.compile(r"--.*$", re.MULTILINE)
_PARAGRAPH_BREAK = re.compile(r"\r?\n[ \t]*\r?\n")
_COMPONENT = re.compile(
    r"(?P<kind>[@#~])(?P<mods>[@&?+\-]*)"
    r"(?:(?P<braced>[^\s@#~{}][^@#~{}\n]*)?\{(?P<body>[^{}\n]*)\}|(?P<word>\w+))"
)
_NOTE = re.compile(r"\((?P<note>[^()\n]*)\)")


class RecipeError(Exception):
    """Base error for recipe files that cannot be read or understood."""


class RecipeParseError(RecipeError):
    """The recipe text could not be parsed."""


class MetadataError(RecipeError):
    """The recipe metadata could not be parsed."""


@dataclass(frozen=True)
class Ingredient:
    """An ingredient mentioned in a recipe step."""

    name: str
    quantity: str | None = None
    unit: str | None = None
    note: str | None = None


@dataclass
class ParsedRecipe:
    """The parsed form of a recipe."""

    metadata: dict[str, Any] = field(default_factory=dict)
    ingredients: list[Ingredient] = field(default_factory=list)
    cookware: list[str] = field(default_factory=list)
    steps: list[str] = field(default_factory=list)

    def servings(self) -> list[int] | None:
        """Servings declared in the metadata, or None if absent or invalid."""
        value = self.metadata.get("servings")
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return [value]
        if isinstance(value, str):
            try:
                return [int(part.strip()) for part in value.split("|")]
            except ValueError:
                return None
        return None


def _strip_comments(text: str, error: type[RecipeError]) -> str:
    text = _BLOCK_COMMENT.sub("", text)
    if "[-" in text:
        raise error("Unclosed block comment")
    return _LINE_COMMENT.sub("", text)


def _split_front_matter(content: str) -> tuple[str | None, str]:
    match = _FRONT_MATTER.match(content)
    if match is None:
        return None, content
    return match["yaml"], content[match.end():]


def _collect_metadata(
    content: str, error: type[RecipeError]
) -> tuple[dict[Any, Any], str]:
    front, body = _split_front_matter(content)
    metadata: dict[Any, Any] = {}
    if front is not None:
        try:
            loaded = yaml.load(front, Loader=_FrontMatterLoader)
        except yaml.YAMLError as exc:
            raise error(f"Invalid front matter: {exc}") from exc
        if loaded is not None:
            if not isinstance(loaded, dict):
                raise error("Front matter must be a mapping")
            metadata.update(loaded)
    for match in _LEGACY_METADATA.finditer(_strip_comments(body, error)):
        metadata[match["key"]] = match["value"]
    return metadata, body


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return ""


def parse_metadata(content: str) -> dict[str, str]:
    """Extract the metadata of a recipe text as a mapping of strings."""
    metadata, _ = _collect_metadata(content, MetadataError)
    return {
        key if isinstance(key, str) else "": _stringify(value)
        for key, value in metadata.items()
    }


def _split_amount(body: str | None) -> tuple[str | None, str | None]:
    if body is None:
        return None, None
    quantity, _, unit = body.partition("%")
    return quantity.strip() or None, unit.strip() or None


def _scan_step(
    text: str, ingredients: list[Ingredient], cookware: list[str]
) -> str:
    pieces: list[str] = []
    pos = 0
    while (match := _COMPONENT.search(text, pos)) is not None:
        pieces.append(text[pos:match.start()])
        pos = match.end()
        kind = match["kind"]
        if match["body"] is not None:
            name = (match["braced"] or "").strip()
        else:
            name = match["word"]
            if text.startswith("{", pos):
                raise RecipeParseError(f"Unclosed brace after {kind}{name}")
        quantity, unit = _split_amount(match["body"])

        if kind == "@":
            if not name:
                raise RecipeParseError("Ingredient without a name")
            note = None
            note_match = _NOTE.match(text, pos)
            if note_match is not None:
                note = note_match["note"].strip() or None
                pos = note_match.end()
            ingredients.append(Ingredient(name, quantity, unit, note))
            pieces.append(name)
        elif kind == "#":
            if not name:
                raise RecipeParseError("Cookware without a name")
            cookware.append(name)
            pieces.append(name)
        else:
            amount = " ".join(part for part in (quantity, unit) if part)
            pieces.append(amount or name)
    pieces.append(text[pos:])
    return "".join(pieces).strip()


def parse_recipe(content: str) -> ParsedRecipe:
    """Parse a recipe text into metadata, ingredients, cookware and steps."""
    metadata, body = _collect_metadata(content, RecipeParseError)
    parsed = ParsedRecipe(metadata=metadata)
    body = _strip_comments(body, RecipeParseError)
    for paragraph in _PARAGRAPH_BREAK.split(body):
        lines = [
            line.strip()
            for line in paragraph.splitlines()
            if line.strip() and not line.lstrip().startswith(">>")
        ]
        if not lines:
            continue
        step = _scan_step(" ".join(lines), parsed.ingredients, parsed.cookware)
        if step:
            parsed.steps.append(step)
    return parsed


def find_title_image(path: str | Path) -> Path | None:
    """Find an image next to the recipe sharing its stem.

    Extensions are tried in the order jpg, jpeg, png, webp. If no exact
    match exists, the extension is compared case-insensitively.
    """
    path = Path(path)
    candidates = [path.with_suffix(f".{ext}") for ext in IMAGE_EXTENSIONS]
    found = next((candidate for candidate in candidates if candidate.exists()), None)
    if found is not None:
        return found
    try:
        siblings = {
            entry.name.lower(): entry
            for entry in path.parent.iterdir()
            if entry.stem == path.stem and entry.is_file()
        }
    except OSError:
        return None
    return next(
        (
            siblings[candidate.name.lower()]
            for candidate in candidates
            if candidate.name.lower() in siblings
        ),
        None,
    )


class Recipe:
    """A recipe file, with its content, metadata and parse result cached."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        if not self.path.stem:
            raise RecipeError(f"Failed to get file stem from path: {self.path}")
        self.name = self.path.stem
        self.title_image = find_title_image(self.path)
        self._content: str | None = None
        self._parsed: ParsedRecipe | None = None
        self._metadata: dict[str, str] | None = None

    def content(self) -> str:
        """Return the text of the recipe file, reading it on first use."""
        if self._content is None:
            try:
                with self.path.open(encoding="utf-8", newline="") as handle:
                    self._content = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise RecipeError(f"Failed to read recipe file: {exc}") from exc
        return self._content

    def recipe(self) -> ParsedRecipe:
        """Return the parsed recipe, parsing it on first use."""
        if self._parsed is None:
            self._parsed = parse_recipe(self.content())
        return self._parsed

    def metadata(self) -> dict[str, str]:
        """Return the recipe metadata as strings, parsing it on first use."""
        if self._metadata is None:
            self._metadata = parse_metadata(self.content())
        return self._metadata

    def __copy__(self) -> Recipe:
        clone = Recipe.__new__(Recipe)
        clone.name = self.name
        clone.path = self.path
        clone.title_image = self.title_image
        clone._content = self._content
        clone._parsed = None
        clone._metadata = None
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return (
            f"Recipe(name={self.name!r}, path={str(self.path)!r}, "
            f"title_image={None if self.title_image is None else str(self.title_image)!r})"
        )