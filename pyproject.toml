[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zewif"
version = "0.1.0"
description = "Data types and binary parsing tools for the Zcash Wallet Interchange Format"
requires-python = ">=3.10"
dependencies = [
    "cbor2",
]
keywords = ["zcash", "wallet", "interchange", "sapling", "orchard", "cbor", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["zewif"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
