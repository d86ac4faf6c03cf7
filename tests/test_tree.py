from pathlib import Path

import pytest

from cooklang_find.recipe import Recipe
from cooklang_find.tree import (
    DirectoryNotFoundError,
    RecipeTree,
    TreeError,
    TreeNotADirectoryError,
    build_tree,
)


def create_test_recipe(directory: Path, name: str, content: str) -> Path:
    path = directory / f"{name}.cook"
    path.write_text(content, encoding="utf-8")
    return path


def create_test_image(directory: Path, name: str, ext: str) -> Path:
    path = directory / f"{name}.{ext}"
    path.write_text("dummy image content", encoding="utf-8")
    return path


def recipe_text(servings: int, body: str) -> str:
    return f"---\nservings: {servings}\n---\n\n{body}"


def test_empty_directory(tmp_path):
    tree = build_tree(tmp_path)

    assert tree.name == tmp_path.name
    assert tree.path == tmp_path
    assert tree.recipe is None
    assert tree.children == {}


def test_single_recipe(tmp_path):
    create_test_recipe(tmp_path, "pancakes", recipe_text(4, "Make pancakes"))

    tree = build_tree(tmp_path)

    assert len(tree.children) == 1
    node = tree.children["pancakes"]
    assert node.name == "pancakes"
    assert node.recipe is not None
    assert node.recipe.name == "pancakes"
    assert node.path == tmp_path / "pancakes.cook"
    assert node.children == {}


def test_recipe_with_image(tmp_path):
    create_test_recipe(tmp_path, "pancakes", recipe_text(4, "Make pancakes"))
    image = create_test_image(tmp_path, "pancakes", "jpg")

    tree = build_tree(tmp_path)

    assert tree.children["pancakes"].recipe.title_image == image


def test_nested_directories(tmp_path):
    breakfast_dir = tmp_path / "breakfast"
    dessert_dir = tmp_path / "dessert"
    breakfast_dir.mkdir()
    dessert_dir.mkdir()
    create_test_recipe(breakfast_dir, "pancakes", recipe_text(4, "Make pancakes"))
    create_test_recipe(breakfast_dir, "waffles", recipe_text(2, "Make waffles"))
    create_test_recipe(dessert_dir, "cake", recipe_text(8, "Bake cake"))

    tree = build_tree(tmp_path)

    assert len(tree.children) == 2

    breakfast = tree.children["breakfast"]
    assert breakfast.name == "breakfast"
    assert breakfast.path == breakfast_dir
    assert breakfast.recipe is None
    assert set(breakfast.children) == {"pancakes", "waffles"}

    dessert = tree.children["dessert"]
    assert dessert.name == "dessert"
    assert dessert.recipe is None
    assert set(dessert.children) == {"cake"}


def test_deeply_nested_recipe(tmp_path):
    deep_path = tmp_path / "a" / "b" / "c" / "d"
    deep_path.mkdir(parents=True)
    create_test_recipe(deep_path, "deep_recipe", recipe_text(1, "Deep recipe"))

    tree = build_tree(tmp_path)

    node = tree.children["a"].children["b"].children["c"].children["d"]
    assert node.path == deep_path
    recipe = node.children["deep_recipe"]
    assert recipe.recipe is not None
    assert recipe.name == "deep_recipe"


def test_directory_without_recipes_is_left_out(tmp_path):
    (tmp_path / "empty").mkdir()
    create_test_recipe(tmp_path, "toast", "Toast bread")

    tree = build_tree(tmp_path)

    assert set(tree.children) == {"toast"}


def test_non_recipe_files_are_ignored(tmp_path):
    (tmp_path / "notes.txt").write_text("not a recipe", encoding="utf-8")

    tree = build_tree(tmp_path)

    assert tree.children == {}


def test_invalid_directory():
    with pytest.raises(DirectoryNotFoundError) as excinfo:
        build_tree("/nonexistent/directory")
    assert "Directory does not exist" in str(excinfo.value)


def test_invalid_directory_is_tree_error():
    with pytest.raises(TreeError):
        build_tree("/nonexistent/directory")


def test_file_is_not_a_directory(tmp_path):
    path = create_test_recipe(tmp_path, "pancakes", "Make pancakes")

    with pytest.raises(TreeNotADirectoryError) as excinfo:
        build_tree(path)
    assert "Path is not a directory" in str(excinfo.value)


def test_current_directory_is_named_root(tmp_path, monkeypatch):
    create_test_recipe(tmp_path, "pancakes", "Make pancakes")
    monkeypatch.chdir(tmp_path)

    tree = build_tree(".")

    assert tree.name == "root"
    assert set(tree.children) == {"pancakes"}


def test_recipe_tree_new():
    tree = RecipeTree("test", Path("/test/path"))

    assert tree.name == "test"
    assert tree.path == Path("/test/path")
    assert tree.recipe is None
    assert tree.children == {}


def test_recipe_tree_new_with_recipe(tmp_path):
    recipe_path = create_test_recipe(tmp_path, "test_recipe", recipe_text(4, "Test recipe"))
    recipe = Recipe(recipe_path)

    tree = RecipeTree("test_recipe", recipe_path, recipe)

    assert tree.name == "test_recipe"
    assert tree.recipe == recipe
    assert tree.children == {}


def test_recipe_tree_path_accepts_string():
    tree = RecipeTree("test", "/test/path")

    assert tree.path == Path("/test/path")