[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "isowire"
version = "0.1.0"
description = "Isometric wireframe viewer for height-map files"
requires-python = ">=3.10"
keywords = ["wireframe", "isometric", "height-map", "viewer", "bresenham"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
isowire = "isowire.app:main"

[tool.hatch.build.targets.wheel]
packages = ["isowire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
