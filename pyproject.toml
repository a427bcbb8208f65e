[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quant-mathema"
version = "0.1.0"
description = "Statistics, smoothing and transformation functions for numeric and financial data series"
requires-python = ">=3.10"
dependencies = []
keywords = ["statistics", "moving-average", "smoothing", "quantitative", "finance", "time-series"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quant_mathema"]

[tool.pytest.ini_options]
addopts = "-ra"
