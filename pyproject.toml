[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supplychain"
version = "1.0.0"
description = "A small step-by-step simulation of suppliers feeding parts to a factory"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "supply chain", "factory", "warehouse", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[project.scripts]
supplychain = "supplychain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["supplychain"]

[tool.pytest.ini_options]
addopts = "-ra"
