[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zesh"
version = "0.1.0"
description = "Building blocks of a small command shell: an input cursor, a quote-aware word scanner, syntax tree nodes and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "scanner", "lexer", "strings"]
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
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
