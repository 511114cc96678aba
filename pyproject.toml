[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kynetctl"
version = "0.1.0"
description = "Parsers for nmcli output, Linux interface queries and a loading animation frame sequencer"
requires-python = ">=3.10"
dependencies = []
keywords = ["networkmanager", "nmcli", "wifi", "ethernet", "network", "proc-net-dev"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kynetctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
