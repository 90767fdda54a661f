[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enigma"
version = "0.1.0"
description = "Hide secret messages inside PNG images by manipulating ancillary chunks."
requires-python = ">=3.10"
dependencies = []
keywords = ["png", "steganography", "chunks", "crc", "images"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enigma = "enigma.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["enigma"]

[tool.pytest.ini_options]
addopts = "-ra"
