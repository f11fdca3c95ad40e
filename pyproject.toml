[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benser"
version = "0.1.0"
description = "A small browser engine library: DOM, CSS parsing, style matching and block layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["browser", "css", "layout", "dom", "box-model", "engine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["benser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
