[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "schedsim"
version = "0.1.0"
description = "CPU scheduling simulations, the banker's algorithm, an integer postfix calculator and the small containers behind them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "operating systems",
    "fcfs",
    "sjf",
    "srtf",
    "round robin",
    "hrrn",
    "priority scheduling",
    "banker's algorithm",
    "deadlock",
    "postfix",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedsim = "schedsim.cli:main"

[tool.setuptools.packages.find]
include = ["schedsim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
