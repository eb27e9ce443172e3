[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "epictracker"
version = "0.1.0"
description = "A small terminal tracker for epics and stories, stored in a JSON file"
requires-python = ">=3.10"
dependencies = []
keywords = ["issue-tracker", "epics", "stories", "cli", "terminal", "json"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
epictracker = "epictracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["epictracker"]

[tool.pytest.ini_options]
addopts = "-ra"
