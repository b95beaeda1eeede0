[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "solitaire-cards"
version = "0.1.0"
description = "A Klondike solitaire game model: cards, stacks, a board grid and a line-command front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["solitaire", "klondike", "cards", "patience", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
solitaire-cards = "solitaire_cards.application:main"

[tool.setuptools.packages.find]
include = ["solitaire_cards*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
