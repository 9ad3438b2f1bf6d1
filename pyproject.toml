[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sacrifice"
version = "0.1.0"
description = "A small top-down arcade game built on an entity-component-system core"
requires-python = ">=3.10"
keywords = ["game", "arcade", "ecs", "entity-component-system", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sacrifice = "sacrifice.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sacrifice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
