[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "psen_scan"
version = "0.1.0"
description = "Data types, zoneset configuration parsing and binary helpers for PSENscan safety laser scanners"
requires-python = ">=3.10"
dependencies = []
keywords = ["laser scanner", "safety", "zoneset", "protocol", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["psen_scan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
