[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "midisynth"
version = "0.1.0"
description = "Building blocks of a MIDI synthesizer: ring-buffered audio, spectrum analysis, ADSR envelope curves, keyboard and MIDI note input."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["midi", "synthesizer", "audio", "adsr", "fft", "spectrum"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["midisynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
