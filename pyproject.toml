[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficmon"
version = "0.1.0"
description = "Building blocks for a network traffic and system usage monitor: settings, traffic sampling, connection selection, alerts and tooltip text"
requires-python = ">=3.10"
keywords = ["network", "traffic", "monitor", "bandwidth", "cpu", "memory", "taskbar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["trafficmon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
