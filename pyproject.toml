[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novakit"
version = "1.0.0"
description = "A small 2D game toolkit on top of pygame: windows, shapes, input, UI widgets, sprites, audio and helpers"
requires-python = ">=3.10"
keywords = ["game", "2d", "pygame", "toolkit", "sprites", "ui"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
novakit-demo = "novakit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["novakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
