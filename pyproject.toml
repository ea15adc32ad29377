[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "wirekit"
version = "0.1.0"
description = "Microcontroller-style core helpers: sketch-style strings, print/println output, number formatting, math and timing"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "sketch", "string", "print", "ltoa", "dtostrf", "millis"]
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
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["wirekit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
