[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectorplay"
version = "0.1.0"
description = "Interactive sandbox for drawing 2D vectors and bouncing a ball off them"
requires-python = ">=3.10"
keywords = ["vectors", "geometry", "physics", "education", "pygame", "collision"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vectorplay = "vectorplay.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vectorplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
