[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monolith"
version = "0.1.0"
description = "Asset cache, cookie-file reader, media-type detection and run options for saving web pages as single HTML documents"
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "web", "archive", "cookies", "cache", "mime", "media-type"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monolith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
