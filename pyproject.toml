[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pfmt"
version = "0.1.0"
description = "A small printf-style formatter with flags, width and precision, plus string and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string", "formatting", "line reader"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pfmt = "pfmt.printf:main"

[tool.hatch.build.targets.wheel]
packages = ["pfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
