[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collidelab"
version = "0.1.0"
description = "Interactive 2D collision-detection sandbox comparing brute force, k-d tree and quadtree broad phases"
requires-python = ">=3.10"
keywords = ["collision", "kd-tree", "quadtree", "aabb", "sat", "simulation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
collidelab = "collidelab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["collidelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
