[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flaggame"
version = "0.1.0"
description = "Software blitting, glyph layout, input tracking and a scene manager for a small 2D action game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "scene manager", "sprites", "blitting", "input"]
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
packages = ["flaggame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
