[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "magpie"
version = "0.1.0"
description = "Core data structures for a crossword board game engine: letter distributions, racks, moves, players, running statistics and logging."
requires-python = ">=3.10"
dependencies = []
keywords = ["crossword", "board game", "rack", "move list", "statistics"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["magpie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
