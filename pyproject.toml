[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "senseshift"
version = "0.1.0"
description = "Sensor, filter, calibration and gesture building blocks for haptic and hand-tracking devices"
requires-python = ">=3.10"
dependencies = []
keywords = ["haptics", "sensors", "calibration", "filters", "gestures", "hand-tracking"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["senseshift"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
