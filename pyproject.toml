[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digraphkit"
version = "0.1.0"
description = "A small weighted directed graph with depth-first traversal, shortest paths, a flow estimate and Graphviz export"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "digraph", "dijkstra", "flow", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
digraphkit = "digraphkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["digraphkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
