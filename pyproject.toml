[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handcontainers"
version = "0.1.0"
description = "Hand-built containers and value types: circular buffer, LRU cache, rationals, smart pointers, linked list, block deque, vector and string."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "data-structures",
    "lru-cache",
    "deque",
    "circular-buffer",
    "rational",
    "smart-pointer",
    "linked-list",
    "vector",
]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["handcontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
