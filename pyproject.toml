[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geneport"
version = "0.1.0"
description = "Genetic search for stock portfolios with the best Sharpe ratio"
requires-python = ">=3.10"
dependencies = []
keywords = ["portfolio", "genetic algorithm", "sharpe ratio", "stocks", "optimisation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
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
geneport = "geneport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["geneport"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
