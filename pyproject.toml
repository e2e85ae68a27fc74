[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratekit"
version = "0.1.0"
description = "Numerical tools for rates and options: root finders, cubic splines, Black-Scholes pricing and small value types."
requires-python = ">=3.10"
keywords = ["finance", "black-scholes", "options", "root-finding", "spline", "rational"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
