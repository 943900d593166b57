[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringtasks"
version = "0.1.0"
description = "Small string utilities: Caesar cipher, e-mail and IPv4 validation, tic-tac-toe board evaluation"
requires-python = ">=3.10"
dependencies = []
keywords = ["caesar", "cipher", "email", "validation", "ipv4", "tic-tac-toe"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stringtasks = "stringtasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stringtasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
