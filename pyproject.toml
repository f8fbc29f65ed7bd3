[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sudokulogic"
version = "0.1.0"
description = "A Sudoku solver that works by logical deduction with naked subsets and pointing sets."
requires-python = ">=3.10"
dependencies = []
keywords = ["sudoku", "puzzle", "solver", "logic", "candidates"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
sudokulogic = "sudokulogic.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sudokulogic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
