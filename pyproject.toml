[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ampkit"
version = "0.1.0"
description = "Motion planning toolkit: graphs, grid configuration spaces, A*, potential fields and wavefront planners"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "motion planning",
    "robotics",
    "a-star",
    "wavefront",
    "potential field",
    "configuration space",
]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ampkit"]

[tool.pytest.ini_options]
addopts = "-ra"
