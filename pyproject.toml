[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clipstack"
version = "0.1.0"
description = "Clipboard history with fuzzy search, JSON persistence and a small Tk picker window"
requires-python = ">=3.10"
keywords = ["clipboard", "history", "fuzzy", "search", "picker", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
clipstack = "clipstack.app:main"

[tool.hatch.build.targets.wheel]
packages = ["clipstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
