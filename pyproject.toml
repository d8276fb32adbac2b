[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelrealm"
version = "0.1.0"
description = "A small top-down tile-map game with a menu, a walking player and a free camera, built on pygame."
requires-python = ">=3.10"
keywords = ["game", "pygame", "tilemap", "sprite", "2d", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelrealm = "pixelrealm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelrealm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
