[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chkkit"
version = "0.1.0"
description = "Test helpers: simulated I/O failures, got/want markup, repeated regex substitutions and temporary file cleanup."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "test helpers", "io simulation", "diff markup", "substitution"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: POSIX",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chkkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
