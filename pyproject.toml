[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacmaze"
version = "0.1.0"
description = "A small terminal maze game: eat dots, dodge patrolling ghosts, clear two levels."
requires-python = ">=3.10"
keywords = ["game", "pacman", "maze", "terminal", "arcade"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pacmaze = "pacmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pacmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
