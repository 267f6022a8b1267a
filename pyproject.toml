[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portfolio-tracker"
version = "0.1.0"
description = "Track an investment portfolio from a CSV history of deposits, conversions, trades and dividends."
requires-python = ">=3.10"
dependencies = []
keywords = ["portfolio", "investment", "stocks", "transactions", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
portfolio-tracker = "portfolio_tracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["portfolio_tracker"]

[tool.pytest.ini_options]
addopts = "-ra"
