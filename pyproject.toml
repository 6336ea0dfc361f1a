[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frames"
version = "0.1.0"
description = "Immediate-mode 2D draw lists: batch rectangles, quads and lines into vertex and index buffers."
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "2d", "draw list", "vertices", "indices", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["frames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
