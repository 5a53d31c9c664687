[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprov"
version = "0.1.0"
description = "Building blocks for describing files, folders, links, groups and system information of Linux hosts as resource state"
requires-python = ">=3.10"
keywords = ["systems administration", "stat", "os-release", "etag", "provisioning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sysprov"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
