[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pockettools"
version = "0.1.0"
description = "A small collection of terminal tools: a file-backed phone book, tic-tac-toe and a mini shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["phonebook", "contacts", "tic-tac-toe", "shell", "terminal"]
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
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pockettools-phonebook = "pockettools.phonebook:main"
pockettools-tictactoe = "pockettools.tictactoe:main"
pockettools-shell = "pockettools.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["pockettools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
