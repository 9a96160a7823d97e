[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liveserve"
version = "1.0.0"
description = "A small development HTTP server with an INI-style configuration reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "development", "ini", "configuration"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
liveserve = "liveserve.server:main"
liveserve-config = "liveserve.config:main"

[tool.hatch.build.targets.wheel]
packages = ["liveserve"]

[tool.pytest.ini_options]
addopts = "-ra"
