[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmin"
version = "0.1.0"
description = "Find the k smallest values of an array with three methods and measure which one is fastest"
requires-python = ">=3.10"
dependencies = []
keywords = ["selection", "k-smallest", "heap", "quicksort", "benchmark", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kmin = "kmin.cli:main"
kmin-gen = "kmin.generator:main"
kmin-show = "kmin.show:main"

[tool.hatch.build.targets.wheel]
packages = ["kmin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
