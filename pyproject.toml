[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bonzai"
version = "0.1.0"
description = "Everyday helpers for command-line tools: functional list helpers, boolean checks, JSON, a rune scanner, file utilities and process helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "utilities", "scanner", "files", "functional", "json"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bonzai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
