[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sylvan"
version = "0.0.1"
description = "Text models for terminal widgets: a wrapping editor core with undo/redo, a single-line input buffer, tab selection and frame glyphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "tui", "widgets", "editor", "text", "undo", "word-wrap"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Widget Sets",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sylvan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
