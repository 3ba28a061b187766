[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contourkit"
version = "0.1.0"
description = "2D contours built from line and arc segments, with connectivity validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "contour", "polyline", "arc", "segment", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
contourkit = "contourkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contourkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
