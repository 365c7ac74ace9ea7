[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stacklab"
version = "0.1.0"
description = "Array and linked stacks, infix to postfix and prefix conversion, parenthesis checking and palindromes, with console menus"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "data structures", "infix", "postfix", "prefix", "palindrome", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stacklab = "stacklab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stacklab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
