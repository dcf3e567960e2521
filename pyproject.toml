[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "salesservice"
version = "0.1.0"
description = "Sales revenue reporting service: loads order data from CSV into SQLite and serves revenue summaries over HTTP."
requires-python = ">=3.10"
keywords = ["sales", "revenue", "orders", "reporting", "csv", "sqlite", "flask"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
salesservice = "salesservice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["salesservice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
