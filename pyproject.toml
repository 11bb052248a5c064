[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "candyquest"
version = "0.1.0"
description = "Building blocks for a 2D side-scrolling platformer: containers, timers, sprite animations, grid pathfinding, entities and pygame rendering."
requires-python = ">=3.10"
keywords = ["game", "platformer", "pathfinding", "animation", "pygame", "a-star"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["candyquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
