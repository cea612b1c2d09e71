[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pswdmng"
version = "0.1.0"
description = "A small command-line password manager that keeps one SQLite store per account"
requires-python = ">=3.10"
dependencies = []
keywords = ["password", "password-manager", "cli", "sqlite"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pswdmng = "pswdmng.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pswdmng"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
