[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "editorcore"
version = "0.1.0"
description = "Name pool, object registry, scene components, world lifecycle, outliner tree, splitter layout and command console logic for a small game-engine editor"
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "editor", "scene-graph", "name-pool", "console", "outliner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["editorcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
