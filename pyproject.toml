[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperblow"
version = "0.1.0"
description = "Bencode, .torrent metadata, magnet URIs and the command-line and selection state for a terminal torrent client"
requires-python = ">=3.10"
dependencies = []
keywords = ["bittorrent", "torrent", "magnet", "bencode", "info-hash"]
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
    "Topic :: Communications :: File Sharing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hyperblow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
