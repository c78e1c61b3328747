[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poetario"
version = "0.1.0"
description = "Interactive console catalogue of poetry books, authors, editions and publishers"
requires-python = ">=3.10"
dependencies = []
keywords = ["poetry", "catalogue", "books", "authors", "publishers", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
poetario = "poetario.control:main"

[tool.hatch.build.targets.wheel]
packages = ["poetario"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
