[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgraphs"
version = "0.1.0"
description = "Graph search puzzles: water jugs, five-letter word ladders and strongly connected word groups"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dfs",
    "bfs",
    "kosaraju",
    "word-ladder",
    "water-jug",
    "strongly-connected-components",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordgraphs-jugs = "wordgraphs.jugs:main"
wordgraphs-ladder = "wordgraphs.ladder:main"
wordgraphs-scc = "wordgraphs.scc:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgraphs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
