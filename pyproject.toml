[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "volmgmt"
version = "0.1.0"
description = "Windows volume management building blocks: I/O control codes, file attributes, file IDs, file information structures and file scan helpers"
requires-python = ">=3.11"
dependencies = [
    "python-dateutil",
]
keywords = ["windows", "ntfs", "refs", "ioctl", "fsctl", "file-attributes", "filetime", "file-id"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["volmgmt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"
