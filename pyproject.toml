[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cooklang-find"
version = "0.1.1"
description = "Library for finding and managing Cooklang recipes in the filesystem"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["cooklang", "recipes", "cooking", "search", "filesystem"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cooklang_find"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
