[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xvsix"
version = "0.1.0"
description = "Small teaching operating-system toolkit: Unix-style utilities, a shell parser, a first-fit allocator and RISC-V Sv39 helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "operating-systems",
    "risc-v",
    "sv39",
    "elf",
    "shell",
    "grep",
    "allocator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xv-grep = "xvsix.grep:main"
xv-wc = "xvsix.wc:main"
xv-cat = "xvsix.cat:main"
xv-echo = "xvsix.echo:main"
xv-find = "xvsix.find:main"
xv-arraylist = "xvsix.arraylist:main"

[tool.hatch.build.targets.wheel]
packages = ["xvsix"]

[tool.hatch.build.targets.sdist]
include = ["xvsix", "tests", "README.md", "pyproject.toml"]

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
