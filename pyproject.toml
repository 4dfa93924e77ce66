[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabuleiro"
version = "0.1.0"
description = "Rules, computer player, saved games and statistics for a small placement-and-move board game, with a text menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "game", "terminal", "computer opponent"]
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
tabuleiro = "tabuleiro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tabuleiro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
