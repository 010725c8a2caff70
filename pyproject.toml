[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xutils"
version = "0.1.0"
description = "Atomic integers, a spin lock, a counting barrier, binary marshalling and memory-region helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["atomic", "spinlock", "barrier", "marshal", "struct", "mmap", "hugepages"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
