[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duelo"
version = "0.1.0"
description = "Turn-based team battle simulator with characters, attack weapons and defensive gear"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "battle", "game", "teams", "combat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
duelo = "duelo.main:main"

[tool.hatch.build.targets.wheel]
packages = ["duelo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
