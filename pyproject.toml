[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fabrica"
version = "0.1.0"
description = "Interactive planner that checks whether a factory can meet an order in time and with the parts in stock"
requires-python = ">=3.10"
dependencies = []
keywords = ["factory", "production", "planning", "inventory", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fabrica = "fabrica.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fabrica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
