[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linguacourse"
version = "0.1.0"
description = "Terminal language-learning courses with grammar, listening and reading blocks, scored questions and time limits, read from SQLite databases"
requires-python = ">=3.10"
keywords = ["language learning", "education", "quiz", "course", "sqlite", "listening"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
linguacourse = "linguacourse.app:main"

[tool.hatch.build.targets.wheel]
packages = ["linguacourse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
