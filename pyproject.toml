[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treelist"
version = "0.1.0"
description = "Interactive terminal browser for a linked list of character binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "binary search tree", "data structures", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treelist = "treelist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treelist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
