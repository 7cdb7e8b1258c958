[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fogl"
version = "0.1.0"
description = "Quaternion and dual-quaternion math, Wavefront OBJ/MTL parsing, parametric meshes and text tables for 3D rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["quaternion", "dual quaternion", "wavefront", "obj", "mtl", "mesh", "3d"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fogl"]

[tool.pytest.ini_options]
addopts = "-ra"
