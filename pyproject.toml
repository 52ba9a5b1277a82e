[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "walletcore"
version = "0.1.0"
description = "Core wallet domain: clients, accounts, transfers, SQLite repositories and use cases"
requires-python = ">=3.10"
dependencies = []
keywords = ["wallet", "accounts", "transactions", "clean-architecture", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["walletcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
