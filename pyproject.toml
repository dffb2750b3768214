[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rotorsettings"
version = "0.1.0"
description = "Antenna rotator controller settings, AVR pin mapping and solar position calculation"
requires-python = ">=3.10"
dependencies = []
keywords = ["ham radio", "antenna rotator", "sun position", "azimuth", "elevation", "avr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rotorsettings"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
