[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astarstage"
version = "0.1.0"
description = "A small text-mode game engine with A* pathfinding demos on a character grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["astar", "pathfinding", "game-engine", "console", "grid", "text-mode", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
astarstage = "astarstage.engine:main"
astarstage-findpath = "astarstage.findpath:main"
astarstage-clickdemo = "astarstage.clickdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["astarstage"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
