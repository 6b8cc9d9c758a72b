[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubzombies"
version = "0.1.0"
description = "A raycasting first-person zombie shooter that plays maps described in .cub files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "fps", "zombies", "pygame", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubzombies = "cubzombies.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubzombies"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
