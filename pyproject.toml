[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "laprairiel"
version = "1.0.0"
description = "Rooms, customers, staff and bookings for a small hotel's front desk, with its text screens"
requires-python = ">=3.10"
dependencies = []
keywords = ["hotel", "booking", "reservations", "front-desk", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["laprairiel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
