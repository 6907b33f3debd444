[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketpet"
version = "0.1.0"
description = "A virtual pocket pet: needs, sleep and sickness scenes, evolving personality, tone synthesis and a 128x64 monochrome canvas"
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual pet", "tamagotchi", "simulation", "behavior tree", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketpet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
