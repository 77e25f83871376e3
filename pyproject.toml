[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palkit"
version = "0.1.0"
description = "Building blocks for small MIDI processors: voice allocation, note maps, fixed-point helpers, ring buffers, event queues and a slot scheduler."
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "synthesizer", "fixed-point", "voice-allocation", "ring-buffer", "scheduler"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["palkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
