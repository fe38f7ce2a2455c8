[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tourguide"
version = "0.1.0"
description = "Guided-tour logic for a service robot: room and place files, map geometry, place learning and goal dispatch"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "tour guide", "navigation", "places", "point in polygon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tourguide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
