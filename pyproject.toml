[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dispswitch"
version = "0.1.0"
description = "Command-line tool for listing display modes and choosing the best match for a specification"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["display", "resolution", "refresh-rate", "monitor", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dispswitch = "dispswitch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dispswitch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
