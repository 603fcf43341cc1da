[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdlite"
version = "0.1.0"
description = "A small line-oriented Markdown to HTML converter"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "html", "converter", "parser"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
