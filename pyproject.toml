[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "katamachine"
version = "0.1.0"
description = "Daily practice of data structures and algorithms: generate a fresh day of kata templates and run their tests."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["kata", "algorithms", "data-structures", "practice", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
katamachine = "katamachine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["katamachine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
