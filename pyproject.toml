[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invaderkit"
version = "0.1.0"
description = "Engine-independent game logic for a Space Invaders style arcade game: actor management, alien formation, levels and game state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "space-invaders", "game-logic", "aliens"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["invaderkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
