[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inventaris"
version = "0.1.0"
description = "Command-line office inventory: categories, items, replacement checks and depreciation reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "assets", "depreciation", "cli", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inventaris = "inventaris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["inventaris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
