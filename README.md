# cooklang-find

Find, search and browse Cooklang recipes (`.cook` files) stored on disk.

## Installation

```
pip install cooklang-find
```

## Usage

### Fetch a recipe by name

`cooklang_find.fetcher.get_recipe(base_dirs, name)` checks each base
directory in order. It returns a `Recipe` for the first
`<base_dir>/<name>.cook` that exists. If no directory has the file, it
returns `None`. It does not search subdirectories, and it does not expand
`~` in paths.

```python
from cooklang_find.fetcher import get_recipe

recipe = get_recipe(["recipes", "/shared/recipes"], "pancakes")
if recipe is not None:
    print(recipe.name, recipe.path, recipe.title_image)
```

### Work with a recipe

`cooklang_find.recipe.Recipe(path)` holds three attributes:

- `name`: the file stem.
- `path`: a `pathlib.Path`.
- `title_image`: the image next to the file with the same stem, or `None`.
  The extensions are tried in this order: `jpg`, `jpeg`, `png`, `webp`. If
  none of them matches exactly, the extension is compared without regard to
  case.

Nothing is read from disk until a method asks for it, and each result is
kept after the first call:

```python
from cooklang_find.recipe import Recipe

recipe = Recipe("recipes/pancakes.cook")
text = recipe.content()      # raw file text
meta = recipe.metadata()     # metadata as strings, e.g. {"servings": "4"}
parsed = recipe.recipe()     # ParsedRecipe
print(parsed.servings(), [i.name for i in parsed.ingredients])
```

**Metadata.** It is read from two places:

- a YAML front-matter block between `---` lines at the top of the file;
- `>> key: value` lines.

`metadata()` turns strings, integers and floats into strings. Any other
value becomes an empty string. Dates are kept as they were written.

**Parsing.** `recipe()` returns a `ParsedRecipe` with these fields:

- `metadata`: the raw values.
- `ingredients`: `Ingredient` objects with `name`, `quantity`, `unit` and
  `note`.
- `cookware`: names.
- `steps`: the text of each paragraph. Timers are replaced by their amount.

Other details of the parser:

- Ingredients are written `@name`, `@multi word{2%cups}` or
  `@salt{1%tsp}(coarse)`.
- Cookware is written `#pan` or `#frying pan{}`.
- Timers are written `~{10%minutes}`.
- `--` line comments and `[- ... -]` block comments are dropped.
- `ParsedRecipe.servings()` returns the servings as a list of integers.
  Values such as `2|4` give several numbers. It returns `None` if servings
  are missing or are not integers.

The functions `parse_metadata(content)` and `parse_recipe(content)` work the
same way on a string.

`find_title_image(path)` is also available on its own.

**Equality and copying.** Two recipes are equal, and hash equally, when
their paths are equal. `copy.copy(recipe)` keeps the loaded text but drops
the cached parse and metadata.

### Search

`cooklang_find.search.search(base_dir, query)` walks `base_dir` recursively
for `.cook` files. It returns the matching recipes, best match first.
Matching ignores case. Each file is scored as follows:

| Condition | Score |
| --- | --- |
| File stem equals the whole query | 20 |
| File stem contains the whole query | 10 |
| Any query word found in the content | 1, plus 0.1 per occurrence, with the extra capped at 5 |

Files that score zero are left out. Equal scores are ordered by lower-case
stem. A directory that does not exist gives an empty list.

```python
from cooklang_find.search import search

for recipe in search("recipes", "maple syrup"):
    print(recipe.name)
```

The steps are also available on their own:

- `search_paths` returns the ranked paths only.
- `score_filename_match`, `score_content_matches`, `count_matches` and
  `sort_results` work on `SearchResult(path, score)` values and paths.

### Build a tree

`cooklang_find.tree.build_tree(base_dir)` returns a `RecipeTree` with
`name`, `path`, `recipe` and `children` (a dict keyed by name).

- Each directory that holds recipes, directly or further down, becomes a
  node.
- Each recipe becomes a leaf whose `recipe` is set.
- The root is named after the base directory, or `"root"` if the path has
  no name.

```python
from cooklang_find.tree import build_tree

root = build_tree("recipes")
pancakes = root.children["breakfast"].children["pancakes"].recipe
```

`build_tree` raises `DirectoryNotFoundError` if the path does not exist,
and `TreeNotADirectoryError` if the path is not a directory.

## Errors

| Module | Exceptions |
| --- | --- |
| `recipe` | `RecipeError`, with subclasses `RecipeParseError` and `MetadataError` |
| `fetcher` | `FetchError` |
| `search` | `SearchError` |
| `tree` | `TreeError`, with subclasses `DirectoryNotFoundError` and `TreeNotADirectoryError` |

`Recipe.content()` raises `RecipeError` if the file cannot be read as UTF-8
text.

## What it does not do

- The package is a library only. It has no command-line tool.
- The parser covers the common recipe syntax described above. It does not
  scale quantities or convert units.

## Development

```
pip install -e ".[test]"
pytest
```