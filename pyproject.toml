[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Small numerical methods: Cholesky and LU decomposition, determinants, interpolation, integration and Newton's method"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "linear algebra",
    "cholesky",
    "lu decomposition",
    "determinant",
    "hilbert matrix",
    "lagrange interpolation",
    "simpson",
    "trapezoid",
    "newton method",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-cholesky = "numlab.cholesky:main"
numlab-determinant = "numlab.determinant:main"
numlab-hilbert = "numlab.hilbert:main"
numlab-lagrange = "numlab.lagrange:main"
numlab-lu = "numlab.lu:main"
numlab-stats = "numlab.discrete_stats:main"
numlab-newton = "numlab.newton:main"
numlab-integrate = "numlab.integration:main"
numlab-random-matrix = "numlab.random_matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
