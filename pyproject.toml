[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zkutil"
version = "0.1.0"
description = "Helpers for plain-text notebook tools: FTS5 query conversion, directory listing and diffing, pagers, optional values, date and text utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["notes", "notebook", "fts5", "sqlite", "text", "pager", "diff"]
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
    "Topic :: Text Processing :: General",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zkutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
