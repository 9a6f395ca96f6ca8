[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcmark"
version = "0.3.0"
description = "Tokenizer, parser and HTML renderer for a compact markup language"
requires-python = ">=3.10"
dependencies = []
keywords = ["markup", "html", "lexer", "parser", "mathjax", "tables"]
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
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arcmark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
