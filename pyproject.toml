[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fragsynth"
version = "0.1.0"
description = "Read linker and brick fragment libraries from SD files and join fragments into larger molecules"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chemistry",
    "cheminformatics",
    "fragments",
    "sdf",
    "mol block",
    "lipinski",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fragsynth = "fragsynth.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fragsynth"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
