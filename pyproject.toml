[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "floorplanner"
version = "2.9.0"
description = "Office floor plan with room assignment, colour coding by team and CSV/SQLite storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["floor plan", "room assignment", "office", "relocation", "sqlite", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
floorplanner = "floorplanner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["floorplanner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
