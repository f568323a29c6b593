[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "appletshell"
version = "0.1.0"
description = "Applet, containment and panel framework for desktop shells, with plugin discovery from metadata.json packages"
requires-python = ">=3.10"
dependencies = []
keywords = ["desktop", "shell", "applet", "panel", "dock", "plugin", "layer-shell"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["appletshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
