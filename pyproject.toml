[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fatecommander"
version = "0.1.0"
description = "Grid-based turn-based tactics engine: battlefield with obstacles, sniper and brawler units, a placement toss and a simple AI commander."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "turn-based", "strategy", "tactics", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fatecommander"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
