[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "botsort"
version = "0.1.0"
description = "Building blocks for BoT-SORT multi-object tracking: Kalman filters, box and feature distances, track list bookkeeping and configuration loading"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["tracking", "multi-object tracking", "kalman filter", "bot-sort", "iou", "computer vision"]
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
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["botsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
