[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combat-tracker"
version = "0.1.0"
description = "A keyboard-driven terminal combat tracker for tabletop role-playing games"
requires-python = ">=3.10"
keywords = ["tabletop", "rpg", "initiative", "combat", "tracker", "terminal", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
combat-tracker = "combat_tracker.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["combat_tracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
