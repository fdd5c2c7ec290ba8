[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "buscador"
version = "0.1.0"
description = "Index a text by word positions and find passages where several words appear close together."
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "index", "inverted-index", "text", "books", "proximity"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
buscador = "buscador.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["buscador"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
