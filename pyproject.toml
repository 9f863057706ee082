[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spatcore"
version = "0.1.0"
description = "Computational kernels for spatial point patterns: distances, close pairs, distance transforms, coverage areas and optimal assignment."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "spatial statistics",
    "point patterns",
    "distance transform",
    "close pairs",
    "optimal transport",
    "assignment problem",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spatcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
