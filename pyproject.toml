[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sujet"
version = "0.1.0"
description = "Integer and string helpers, a student register, and a French word-guessing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "students", "word game", "wordle", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: French",
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
wordguess = "sujet.wordguess:main"

[tool.hatch.build.targets.wheel]
packages = ["sujet"]

[tool.pytest.ini_options]
addopts = "-ra"
