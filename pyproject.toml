[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statline"
version = "1.0"
description = "A small status monitor that builds one status line from system information"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["status", "statusbar", "monitor", "battery", "cpu", "memory", "network", "x11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
statline = "statline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["statline"]

[tool.pytest.ini_options]
addopts = "-ra"
