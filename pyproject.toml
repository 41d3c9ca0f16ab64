[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravroom"
version = "0.1.0"
description = "A small room platformer where the player flips gravity onto any wall"
requires-python = ">=3.10"
keywords = ["game", "platformer", "gravity", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = ["pygame"]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gravroom = "gravroom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gravroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
