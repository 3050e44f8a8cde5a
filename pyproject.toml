[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetris"
version = "0.1.0"
description = "A small falling-block puzzle game with ghost and next-piece previews"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["tetris", "game", "puzzle", "pygame", "falling blocks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
tetris = "tetris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
