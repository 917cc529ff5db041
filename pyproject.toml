[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcimblock"
version = "0.1.0"
description = "Building blocks for time-critical misinformation blocking: SFMT random numbers, delayed cascades, reverse-walk sampling and weighted max cover"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "influence-maximization",
    "misinformation",
    "rumor-blocking",
    "social-networks",
    "max-cover",
    "dominator-tree",
    "sfmt",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tcimblock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
