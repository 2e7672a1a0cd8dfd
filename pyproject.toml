[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wmcore"
version = "0.1.0"
description = "Window, workspace, tag and layout models for a tiling window manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "layout", "workspace", "tags"]
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
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wmcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
