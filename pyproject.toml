[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snplabs"
version = "1.0.0"
description = "Small console exercises: bit operations, shapes, word sorting, days per month, include listings and a terminal tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "bit-operations",
    "calendar",
    "sorting",
    "tic-tac-toe",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snp-bitcalc = "snplabs.bitcalc:main"
snp-bittricks = "snplabs.bittricks:main"
snp-shapes = "snplabs.shapes:main"
snp-wordsort = "snplabs.wordsort:main"
snp-monthdays = "snplabs.monthdays:main"
snp-tictactoe = "snplabs.tictactoe.view:main"

[tool.hatch.build.targets.wheel]
packages = ["snplabs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
