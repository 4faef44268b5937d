[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "startkit"
version = "0.1.0"
description = "A small toolkit for 2D games on pygame: windows, textures, text, clocks, cameras, animations, states, input and a widget base class"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "2d", "sprites", "animation", "widgets"]
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
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["startkit"]

[tool.pytest.ini_options]
addopts = "-ra"
