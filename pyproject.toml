[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fm7vm"
version = "0.1.0"
description = "Machine state files, device models and keyboard/settings tables for an FM-7 / FM77AV virtual machine"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fm-7",
    "fm77av",
    "emulator",
    "state file",
    "keymap",
    "retro computing",
]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fm7vm"]

[tool.hatch.build.targets.sdist]
include = ["fm7vm", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
