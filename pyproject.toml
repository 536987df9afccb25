[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vehicle-rental"
version = "0.1.0"
description = "In-memory model of a vehicle rental office: clients, vehicles, rentals and repositories."
requires-python = ">=3.10"
dependencies = []
keywords = ["rental", "vehicles", "clients", "repository"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vehicle-rental = "vehicle_rental.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vehicle_rental"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
