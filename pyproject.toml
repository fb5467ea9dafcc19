[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazerunner"
version = "0.1.0"
description = "A maze game with patrolling enemies, difficulty levels and a persistent high score"
requires-python = ">=3.10"
keywords = ["maze", "game", "pygame", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
mazerunner = "mazerunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazerunner"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
