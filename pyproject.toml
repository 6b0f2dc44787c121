[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursorkit"
version = "0.1.0"
description = "Cursor lists, BFS and DFS graphs, and the command-line tools built on them"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "cursor", "graph", "bfs", "dfs", "shortest path", "strongly connected components", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cursorkit-lex = "cursorkit.lex:main"
cursorkit-findpath = "cursorkit.findpath:main"
cursorkit-findcomponents = "cursorkit.findcomponents:main"

[tool.hatch.build.targets.wheel]
packages = ["cursorkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
