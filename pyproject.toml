[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sophie"
version = "1.0.0"
description = "Fetch monthly adjusted stock data and estimate a maximum buy price from dividend yield"
requires-python = ">=3.10"
keywords = ["stocks", "dividends", "alphavantage", "investment", "cli", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Financial and Insurance Industry",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
sophie = "sophie.cli:main"
sophie-api = "sophie.api:main"

[tool.hatch.build.targets.wheel]
packages = ["sophie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
