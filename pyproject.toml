[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterpad"
version = "0.1.0"
description = "A small raster drawing pad with DDA, Bresenham and midpoint-circle rasterisation and polygon transforms"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["raster", "bresenham", "dda", "midpoint-circle", "polygon", "drawing", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rasterpad = "rasterpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
