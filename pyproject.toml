[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vlrutil"
version = "0.1.0"
description = "General-purpose utilities: bit tests, range-checked casts, result codes, string conversion, caching, checksums, edit distance and logging hooks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "result-codes",
    "hresult",
    "crc32",
    "levenshtein",
    "mru-cache",
    "logging",
    "string-conversion",
    "multi-sz",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vlrutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
