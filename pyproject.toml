[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telnetkit"
version = "1.0.0"
description = "A small telnet client with option negotiation, a scrolling terminal buffer and a key code table"
requires-python = ">=3.10"
dependencies = []
keywords = ["telnet", "terminal", "client", "keycodes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Telnet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
telnetkit = "telnetkit.client:main"

[tool.hatch.build.targets.wheel]
packages = ["telnetkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
