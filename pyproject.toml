[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "t1hash"
version = "0.1.0"
description = "Pure-Python t1ha2 fast positive hash: 64- and 128-bit, one-shot and streaming"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "t1ha", "t1ha2", "non-cryptographic", "checksum"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["t1hash"]

[tool.pytest.ini_options]
addopts = "-ra"
