[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xfasttrie"
version = "0.1.0"
description = "An x-fast trie over 32-bit unsigned integer keys, with a small benchmark against a sorted map"
requires-python = ">=3.10"
keywords = ["x-fast trie", "trie", "predecessor", "data structure", "integer keys", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
xfasttrie-bench = "xfasttrie.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["xfasttrie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
