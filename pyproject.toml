[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ubobj"
version = "0.1.0"
description = "Data objects for neutrino detector event records: CRT, MuCS, optical flashes, DAQ times, triggers and selection results"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "neutrino", "lartpc", "data-products", "trigger", "optical"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ubobj"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
