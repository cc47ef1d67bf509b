[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "ttysol"
version = "1.4.1"
description = "Klondike solitaire played in the terminal with the keyboard"
requires-python = ">=3.10"
keywords = ["solitaire", "klondike", "cards", "terminal", "curses", "game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
ttysol = "ttysol.cli:main"

[tool.setuptools]
packages = ["ttysol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
