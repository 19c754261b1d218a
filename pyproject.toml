[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wcetbench"
version = "0.1.0"
description = "Deterministic embedded-style benchmark building blocks: a portable random generator, a bump heap, block merge sort primitives and a window-lift statechart model"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "embedded",
    "wcet",
    "block-merge-sort",
    "statechart",
    "allocator",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wcetbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
