[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "walcache"
version = "0.1.0"
description = "A thread-safe in-memory LRU cache with per-entry TTL and a write-ahead log for recovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "lru", "ttl", "write-ahead-log", "wal"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
walcache-demo = "walcache.demo:main"

[tool.setuptools.packages.find]
include = ["walcache*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
