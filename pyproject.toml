[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocrunner"
version = "0.1.0"
description = "A runner for daily puzzle solvers with timing, plus 2D point and grid helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent", "puzzles", "runner", "grid", "point"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
aocrunner = "aocrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
