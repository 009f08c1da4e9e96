[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopherlab"
version = "0.1.0"
description = "Small command-line tools, library helpers and tiny web apps: string and number reversal, a greeter, mapping sums, a hello server, a release watcher, a JSON album service and a file-backed wiki."
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = [
    "reverse",
    "hello",
    "sums",
    "wiki",
    "rest",
    "flask",
]
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
    "Framework :: Flask",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pyyaml",
]

[project.scripts]
hello = "gopherlab.hello_cli:main"
generic-sums = "gopherlab.sums:main"
helloserver = "gopherlab.helloserver:main"
outyet = "gopherlab.outyet:main"
albums-server = "gopherlab.albums:main"
wiki-server = "gopherlab.wiki:main"

[tool.hatch.build.targets.wheel]
packages = ["gopherlab"]

[tool.pytest.ini_options]
addopts = "-ra"
