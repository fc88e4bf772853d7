[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubemaze"
version = "0.1.0"
description = "Building blocks for a raycasting maze: XPM textures, map validation, player movement and grid raycasting"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "maze", "game", "cub", "xpm"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cubemaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
