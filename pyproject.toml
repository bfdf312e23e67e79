[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "easyreq"
version = "0.1.0"
description = "Value types for describing HTTP requests: URLs, bodies, case-insensitive headers, credentials, options, callbacks, multipart parts and header parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "headers", "multipart", "authentication", "url-encoding", "cookies"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["easyreq"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
