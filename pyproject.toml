[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginekit"
version = "0.1.0"
description = "Entity-component scene, rigid-body physics, gameplay systems and mesh tools for small 3D games"
requires-python = ">=3.10"
keywords = ["game engine", "entity component", "physics", "mesh", "obj", "sculpting"]
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
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["enginekit"]

[tool.pytest.ini_options]
addopts = "-ra"
