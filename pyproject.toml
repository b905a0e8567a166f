[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecosim"
version = "0.1.0"
description = "Live view of a simple ecosystem simulation: creatures plotted on a field with per-species counts"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecosystem", "simulation", "visualization", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecosim = "ecosim.view:main"

[tool.hatch.build.targets.wheel]
packages = ["ecosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
