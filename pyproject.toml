[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitalk"
version = "0.1.0"
description = "Send text between processes one bit at a time over SIGUSR1/SIGUSR2, with the small string, memory, list, printf and line-reading helpers it is built on"
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "sigusr1", "sigusr2", "printf", "line-reader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minitalk-server = "minitalk.server:main"
minitalk-client = "minitalk.client:main"
minitalk-server-bonus = "minitalk.server:bonus_main"
minitalk-client-bonus = "minitalk.client:bonus_main"

[tool.hatch.build.targets.wheel]
packages = ["minitalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
