[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starforge"
version = "0.1.0"
description = "A small entity-component-system game framework with transforms, a state machine, timing, collision and physics"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["ecs", "entity-component-system", "game", "transform", "quaternion", "state-machine", "collision"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["starforge"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
