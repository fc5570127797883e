[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricsdb"
version = "0.1.0"
description = "A small in-memory time-series metrics store with write-ahead-log recovery, a TCP server and a client"
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "time-series", "database", "wal", "skip-list", "trie"]
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
test = ["pytest", "pytest-asyncio"]

[project.scripts]
metricsdb-server = "metricsdb.server:main"
metricsdb-client = "metricsdb.client:main"

[tool.hatch.build.targets.wheel]
packages = ["metricsdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
