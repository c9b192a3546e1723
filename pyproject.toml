[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sharesquare"
version = "0.1.0"
description = "Encode transactions into fixed-size namespaced shares and parse transactions and blobs back out of shares."
requires-python = ">=3.10"
dependencies = []
keywords = ["shares", "namespace", "data availability", "encoding", "blobs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sharesquare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
