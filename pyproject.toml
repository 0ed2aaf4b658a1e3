[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pollhook"
version = "0.1.0"
description = "Per-alias ordered payload cache with long polling and request value extraction for webhooks"
requires-python = ">=3.10"
dependencies = [
    "cachetools",
]
keywords = ["webhook", "long-polling", "cache", "verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["pollhook"]

[tool.pytest.ini_options]
addopts = "-ra"
