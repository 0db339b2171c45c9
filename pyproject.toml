[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rynshell"
version = "2.0.0a0"
description = "A small interactive command shell with pipelines, aliases, history hints and a configurable prompt"
requires-python = ">=3.10"
keywords = ["shell", "repl", "command-line", "pipeline", "prompt"]
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
    "Topic :: System :: System Shells",
]
dependencies = [
    "platformdirs",
    "prompt-toolkit",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ryn = "rynshell.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["rynshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
