[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cocangua"
version = "1.0.0"
description = "Co Ca Ngua, the Vietnamese race board game, played in the terminal with classic, racing and computer-opponent modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "ludo", "co ca ngua", "dice", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cocangua = "cocangua.cli:main"

[tool.setuptools]
packages = ["cocangua"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
