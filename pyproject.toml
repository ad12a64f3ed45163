[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringer"
version = "0.1.0"
description = "Discover GitHub composite actions in a directory and cache their inputs and outputs as JSON"
requires-python = ">=3.10"
keywords = ["github", "actions", "composite-actions", "yaml", "ci"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]
dependencies = [
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
stringer = "stringer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stringer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
