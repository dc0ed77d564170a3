[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "closestpair"
version = "0.1.0"
description = "Closest pair of points algorithms and a timing benchmark that writes CSV statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["closest pair", "divide and conquer", "brute force", "benchmark", "quartiles"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
closestpair-bench = "closestpair.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["closestpair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
