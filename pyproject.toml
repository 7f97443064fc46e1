[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ljmd"
version = "0.1.0"
description = "Microcanonical (NVE) molecular dynamics of Lennard-Jones fluid mixtures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "molecular dynamics",
    "lennard-jones",
    "simulation",
    "nve",
    "gear predictor-corrector",
    "velocity verlet",
    "fluids",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ljmd = "ljmd.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["ljmd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
