[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gifter"
version = "0.1.0"
description = "Play animated GIFs in the terminal as ASCII art or through the Kitty graphics protocol"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["gif", "ascii", "terminal", "kitty", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gifter = "gifter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gifter"]

[tool.pytest.ini_options]
addopts = "-ra"
