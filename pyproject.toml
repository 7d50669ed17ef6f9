[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "milkfarm"
version = "0.1.0"
description = "A text-mode milking clicker game: fill your bucket, sell at the market, buy a flat in the city."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "clicker", "farm", "simulation", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
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

[project.scripts]
milkfarm = "milkfarm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["milkfarm"]

[tool.pytest.ini_options]
addopts = "-ra"
