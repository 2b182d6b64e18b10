[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pckonfig"
version = "0.1.0"
description = "Console inventory of PC components with configuration building, search and binary storage"
requires-python = ">=3.10"
keywords = ["pc", "components", "inventory", "configuration", "console"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pckonfig = "pckonfig.console:main"

[tool.hatch.build.targets.wheel]
packages = ["pckonfig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
