[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practica"
version = "0.1.0"
description = "Classic programming exercises and a small contact book, as a Python library and commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "education", "contacts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practica-contacts = "practica.cli:main"
practica-basics = "practica.basics:main"

[tool.hatch.build.targets.wheel]
packages = ["practica"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
