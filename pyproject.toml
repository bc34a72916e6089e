[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lispy"
version = "0.1.0"
description = "A small interactive Lisp-style calculator that reads and evaluates S-expressions"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "s-expression", "calculator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lispy = "lispy.repl:main"
lispy-echo = "lispy.echo:main"
lispy-hello = "lispy.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["lispy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
