[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodechain"
version = "0.1.0"
description = "Algorithms on singly linked lists: cycles, reversal, rotation, merging, removal and more."
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "algorithms", "data structures", "singly linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nodechain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
