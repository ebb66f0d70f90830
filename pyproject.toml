[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tallerdb"
version = "0.1.0"
description = "Fixed-size record formats for a vehicle repair workshop: employees, vehicles, repairs, invoices and file backups"
requires-python = ">=3.10"
keywords = ["workshop", "repairs", "invoices", "records", "fixed-size records"]
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
    "Topic :: Office/Business",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tallerdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
