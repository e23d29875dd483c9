[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Classic numerical methods: interpolation, quadrature, linear systems, approximation, ODEs and root finding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "interpolation",
    "quadrature",
    "gauss-legendre",
    "lu-decomposition",
    "runge-kutta",
    "root-finding",
]
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
numlab = "numlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
