[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "um98x"
version = "0.1.0"
description = "Detect Unicore UM981/UM982 GNSS receivers and parse their GGA, VTG and HPR sentences"
requires-python = ">=3.10"
dependencies = ["pyserial"]
keywords = ["gnss", "gps", "nmea", "um982", "um981", "unicore", "serial"]
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
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Terminals :: Serial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
um98x-detect = "um98x.detect:main"

[tool.hatch.build.targets.wheel]
packages = ["um98x"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
