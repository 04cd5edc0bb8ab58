[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "v_utils"
version = "0.1.0"
description = "Small utilities for trading tools: percentages, pairs, timeframes, compact formats, random walks and terminal snapshot plots."
requires-python = ">=3.11"
keywords = ["trading", "utilities", "percent", "timeframe", "snapshot", "random-walk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["v_utils"]

[tool.hatch.build.targets.sdist]
include = ["v_utils", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 120
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
