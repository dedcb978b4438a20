[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbook"
version = "0.1.0"
description = "Classic data structures and algorithms: arrays, queues, heaps, hash tables and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "graphs", "heaps", "queues", "hash tables"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
