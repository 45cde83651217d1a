[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rocketsim"
version = "0.1.0"
description = "A terminal rocket flight game with altitude-dependent gravity and switchable engine stages"
requires-python = ">=3.10"
keywords = ["game", "terminal", "rocket", "simulation", "ascii"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rocketsim = "rocketsim.game:main"

[tool.hatch.build.targets.wheel]
packages = ["rocketsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
