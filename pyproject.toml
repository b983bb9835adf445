[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tabjson"
version = "0.1.0"
description = "Table-driven JSON writer with fixed-capacity buffers and whitespace compression"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "writer", "serialization", "buffer", "pretty-print"]
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
    "Topic :: File Formats :: JSON",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tabjson = "tabjson.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tabjson"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
