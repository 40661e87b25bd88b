[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "puntajes"
version = "0.1.0"
description = "Flat-file score store for a game server: user, match and index records with a balanced lookup tree and a top-five ranking"
requires-python = ">=3.10"
dependencies = []
keywords = ["scores", "ranking", "binary-records", "bst", "game-server"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["puntajes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
