[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verletring"
version = "0.1.0"
description = "A small interactive Verlet-integration sandbox: a ring of spring-linked bodies inside a circular boundary."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "verlet", "simulation", "springs", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
test = [
    "pytest",
]

[project.scripts]
verletring = "verletring.app:main"

[tool.hatch.build.targets.wheel]
packages = ["verletring"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
