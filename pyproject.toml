[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kocompiler"
version = "0.1.0"
description = "A small compiler front end: lexer, expression parser, AST printer and ARM assembly skeleton"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "parser", "ast", "arm", "assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kocompiler = "kocompiler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kocompiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
