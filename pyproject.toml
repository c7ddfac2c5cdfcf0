[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "numlab"
version = "0.1.0"
description = "Numerical methods workbench: cubic splines, linear system solvers, Runge-Kutta integration and rod heating simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "cubic-spline",
    "interpolation",
    "linear-systems",
    "gauss",
    "cramer",
    "seidel",
    "jacobi",
    "sor",
    "lu-decomposition",
    "runge-kutta",
    "heat-equation",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-systems = "numlab.systemsapp:main"
numlab-rungekutta = "numlab.rkapp:main"
numlab-heating = "numlab.heatingapp:main"

[tool.setuptools.packages.find]
include = ["numlab*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
