[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tempnet"
version = "0.1.0"
description = "Temporal (time-varying) contact networks for event-driven epidemic simulations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "temporal network",
    "dynamic graph",
    "epidemics",
    "activity-driven",
    "erdos-renyi",
    "sirx",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tempnet"]

[tool.pytest.ini_options]
addopts = "-ra"
