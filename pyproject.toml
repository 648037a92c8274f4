[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyscraper"
version = "0.1.0"
description = "Backtracking solver for skyscraper puzzles of size 4 to 9"
requires-python = ">=3.10"
dependencies = []
keywords = ["skyscraper", "puzzle", "solver", "backtracking", "latin square"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skyscraper = "skyscraper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skyscraper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
