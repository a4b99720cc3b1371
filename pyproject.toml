[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocks"
version = "0.1.0"
description = "A small 3D game engine with scenes, layers, entities, a first-person player and a pygame software renderer"
requires-python = ">=3.10"
keywords = ["game", "engine", "3d", "pygame", "scenes", "software-renderer"]
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
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blocks = "blocks.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
