[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akecs"
version = "0.1.0"
description = "A small entity-component-system: entity handles, pooled component storage and signature-driven systems."
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "game-engine", "components", "systems"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["akecs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
