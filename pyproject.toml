[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sowascene"
version = "0.1.0"
description = "Scene graph, node registry and 2D quad batching core for a small game engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "scene-graph", "2d", "batching", "vertex-layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sowascene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
