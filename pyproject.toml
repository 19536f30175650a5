[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bgui"
version = "1.0.0"
description = "A small retained-mode GUI toolkit: layouts, text, buttons, font atlases and quad draw requests"
requires-python = ">=3.10"
keywords = ["gui", "ui", "opengl", "layout", "widgets", "font-atlas"]
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
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
