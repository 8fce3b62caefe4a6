[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lpccore"
version = "0.1.0"
description = "Host-side model of small Cortex-M0 runtime helpers: console formatting and scanning, random numbers, IPv4 text conversion and core peripheral registers"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "microcontroller", "cortex-m0", "printf", "nvic", "systick", "simulation"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lpccore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
