[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parnumerics"
version = "0.1.0"
description = "Numerical differentiation, integration and LU factorisation with serial and threaded timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "finite differences",
    "simpson",
    "trapezoidal",
    "lu decomposition",
    "doolittle",
    "crout",
    "benchmark",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
parnumerics = "parnumerics.cli:main"
parnumerics-dataset = "parnumerics.dataset:main"

[tool.hatch.build.targets.wheel]
packages = ["parnumerics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
