[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notedetect"
version = "0.1.0"
description = "Musical note detection by FFT, with note colours, LED matrix frames, buzzer timing and a monochrome display buffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "pitch", "music", "notes", "led-matrix", "buzzer", "ssd1306"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notedetect = "notedetect.detector:main"

[tool.hatch.build.targets.wheel]
packages = ["notedetect"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
