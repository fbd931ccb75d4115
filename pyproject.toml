[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oddflash"
version = "0.1.0"
description = "Full-screen oddball flash stimulus with TCP event triggers"
requires-python = ">=3.10"
keywords = ["oddball", "stimulus", "eeg", "trigger", "experiment"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oddflash = "oddflash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oddflash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
