[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poks"
version = "0.1.0"
description = "Texas hold'em poker against computer opponents in the terminal"
requires-python = ">=3.10"
keywords = ["poker", "texas-holdem", "cards", "game", "terminal", "curses"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokst = "poks.tui:main"

[tool.hatch.build.targets.wheel]
packages = ["poks"]

[tool.pytest.ini_options]
addopts = "-ra"
