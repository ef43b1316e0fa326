[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvutils"
version = "0.1.0"
description = "User-level utilities and kernel bookkeeping models of a small teaching Unix, in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unix",
    "teaching",
    "shell",
    "grep",
    "printf",
    "malloc",
    "file-descriptors",
    "virtual-memory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xvutils-grep = "xvutils.grep:main"

[tool.hatch.build.targets.wheel]
packages = ["xvutils"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
