[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketledger"
version = "0.1.0"
description = "A small terminal ledger for recording personal income and expenses per member, with JSON file storage and simple reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "ledger", "budget", "expenses", "income", "cli"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pocketledger = "pocketledger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pocketledger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
