[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Classic abstract data types (dynamic array, linked list, hash map, heap priority queue) with small programs built on them."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "vector", "linked list", "hash table", "priority queue", "heap"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtkit-cat = "adtkit.cat:main"

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.pytest.ini_options]
addopts = "-ra"
