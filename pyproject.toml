[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tulipwar"
version = "0.1.0"
description = "War of the Tulips: a bee-versus-wasp paddle game"
requires-python = ">=3.10"
keywords = ["game", "paddle", "arcade", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tulipwar = "tulipwar.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tulipwar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
