[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treegraph"
version = "0.1.0"
description = "Classic search trees, heaps and graph algorithms in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search tree",
    "avl",
    "aa tree",
    "red-black tree",
    "b-tree",
    "b+ tree",
    "threaded binary tree",
    "heap",
    "dijkstra",
    "prim",
    "kruskal",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["treegraph"]

[tool.hatch.build.targets.sdist]
include = [
    "treegraph",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
