[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyweb"
version = "0.1.0"
description = "A small single-threaded HTTP server with a handful of fixed routes, a greeting form, file uploads and a matching client."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "web", "socket", "client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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
tinyweb-server = "tinyweb.server:main"
tinyweb-client = "tinyweb.client:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyweb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
