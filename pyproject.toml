[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heatsim"
version = "0.1.0"
description = "Two-dimensional heat diffusion setup on grayscale heatmaps"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["heat equation", "diffusion", "simulation", "csr", "sparse matrix", "heatmap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
heatsim = "heatsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["heatsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
