[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wheelrt"
version = "0.0.1"
description = "Building blocks of the Wheel language: character cursor, token kinds, arena, AST nodes and a small interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "lexer", "language", "ast", "arena"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wheelrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
