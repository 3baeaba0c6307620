[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stickui"
version = "0.1.0"
description = "A small three-button tabbed terminal-style UI for a 240x135 handheld screen, with a desktop simulator"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["embedded", "ui", "tabs", "buttons", "simulator", "handheld", "pubsub"]
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
    "Framework :: AsyncIO",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
stickui-sim = "stickui.sim:main"

[tool.hatch.build.targets.wheel]
packages = ["stickui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
