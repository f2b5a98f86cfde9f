[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vertigo"
version = "1.2.1"
description = "Pure-Python building blocks for a Vertica client: connection strings, authentication hashing, message framing and decoding, and logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["vertica", "database", "sql", "client", "wire-protocol"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vertigo"]

[tool.hatch.build.targets.sdist]
include = ["vertigo", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
