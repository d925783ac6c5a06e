[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vfsim"
version = "0.1.0"
description = "An in-memory simulated file system with a small interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "virtual", "simulation", "shell", "vfs"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vfsim = "vfsim.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["vfsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
