[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "attractors"
version = "0.1.0"
description = "Interactive solver for strange attractors (Lorenz, Four Wing, Halvorsen, Rossler, Chen, Sprott) with CSV output"
requires-python = ">=3.10"
dependencies = []
keywords = ["chaos", "strange attractor", "lorenz", "ode", "runge-kutta", "euler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
attractors = "attractors.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["attractors"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
