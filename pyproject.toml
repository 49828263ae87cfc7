[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termtd"
version = "0.1.0"
description = "A small real-time tower defense game played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tower-defense", "terminal", "curses"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termtd = "termtd.game:main"

[tool.hatch.build.targets.wheel]
packages = ["termtd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
