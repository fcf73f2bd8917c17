[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "islandpaths"
version = "0.1.0"
description = "Find and print every shortest route between islands connected by bridges"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "shortest-path", "routes", "islands", "bridges"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathfinder = "islandpaths.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["islandpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
