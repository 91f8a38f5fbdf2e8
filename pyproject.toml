[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soshell"
version = "1.0.0"
description = "A small interactive POSIX shell with built-in file, descriptor, bit and calculator commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipes", "redirection", "file descriptors", "bit operations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
soshell = "soshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["soshell"]

[tool.pytest.ini_options]
addopts = "-ra"
