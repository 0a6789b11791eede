[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigidscene"
version = "0.1.0"
description = "Vectors, matrices, quaternions and rigid-body transforms for a small interactive 3D scene, with mesh builders and PPM image I/O."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "3d",
    "quaternion",
    "rigid-body",
    "transform",
    "matrix",
    "mesh",
    "ppm",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rigidscene"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
