[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellsim"
version = "0.1.0"
description = "Interactive cellular automata: Conway's Game of Life and Langton's Ant"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["cellular automata", "game of life", "conway", "langton", "ant", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cellsim = "cellsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cellsim"]

[tool.pytest.ini_options]
addopts = "-ra"
