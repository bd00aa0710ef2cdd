[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskkit"
version = "0.1.0"
description = "Small utilities: text file operations, run-length encoding, chunked zlib compression and a snake game"
requires-python = ">=3.10"
keywords = ["rle", "run-length", "zlib", "compression", "snake", "pygame", "files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskkit-fileops = "taskkit.fileops:main"
taskkit-rle = "taskkit.rle:main"
taskkit-zchunks = "taskkit.zchunks:main"
taskkit-snake = "taskkit.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["taskkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
