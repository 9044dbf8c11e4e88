[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tamatasker"
version = "0.1.0"
description = "A Telegram task-tracking bot backed by SQLite"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["telegram", "bot", "tasks", "sqlite", "todo", "long-polling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
tamatasker = "tamatasker.main:main"

[tool.hatch.build.targets.wheel]
packages = ["tamatasker"]

[tool.pytest.ini_options]
addopts = "-ra"
