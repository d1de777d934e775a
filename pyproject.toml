[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pointgeom"
version = "0.1.0"
description = "Computational geometry for spatial point patterns: neighbours, close pairs, segment intersections, rasterisation and graph triangles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "spatial statistics",
    "point patterns",
    "nearest neighbour",
    "rasterisation",
    "line segments",
    "computational geometry",
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
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pointgeom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
