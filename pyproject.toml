[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cellquest"
version = "1.0.0"
description = "A side-scrolling platformer where a cancer cell dodges immune cells across three levels"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cellquest = "cellquest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cellquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
