[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "qmac"
version = "0.1.0"
description = "Boolean function minimization with the Quine-McCluskey method and coverage-table reduction"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "quine-mccluskey",
    "boolean",
    "logic minimization",
    "prime implicants",
    "digital logic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qmac = "qmac.cli:main"

[tool.setuptools.packages.find]
include = ["qmac*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
