[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booty"
version = "0.1.0"
description = "Bootstrap a local development setup folder and example config in your home directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["bootstrap", "dev-setup", "cli", "developer-tools"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
booty = "booty.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["booty"]

[tool.pytest.ini_options]
addopts = "-ra"
