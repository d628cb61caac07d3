[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parabench"
version = "0.1.0"
description = "Small parallel-computing benchmarks: wavefront grid, hybrid prime sieve and sub-matrix aggregation"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "parallel", "sieve", "wavefront", "matrix", "speedup"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
parabench-wavefront = "parabench.wavefront:main"
parabench-sieve = "parabench.sieve:main"
parabench-matrix = "parabench.matrix:main"

[tool.hatch.build.targets.wheel]
packages = ["parabench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
