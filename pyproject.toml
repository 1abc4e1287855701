[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiiorganizer"
version = "0.1.0"
description = "Organise a folder of Wii WBFS games and fetch their cover art"
requires-python = ">=3.10"
keywords = ["wii", "wbfs", "games", "covers", "organizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests>=2.28",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
wii-organizer = "wiiorganizer.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["wiiorganizer"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
