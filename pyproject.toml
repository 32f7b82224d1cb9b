[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "suitekit"
version = "0.1.0"
description = "A small unit-testing framework: a registry of suites and tests, with plain-text and interactive console reporters."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "testing",
    "unit-testing",
    "test-registry",
    "test-suite",
    "console",
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
    "Topic :: Software Development :: Testing :: Unit",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["suitekit"]

[tool.hatch.build.targets.sdist]
include = ["suitekit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
