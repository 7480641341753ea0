[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuimines"
version = "0.1.0"
description = "A terminal-based Minesweeper game built on curses."
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "terminal", "curses", "tui", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
tuimines = "tuimines.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tuimines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
