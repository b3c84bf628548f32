[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunnelgfx"
version = "0.1.0"
description = "Scene math, cameras, prefab meshes and a scrolling tunnel for a small real-time 3D renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "rendering", "matrix", "camera", "mesh", "game-engine"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tunnelgfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
