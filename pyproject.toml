[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practica"
version = "0.1.0"
description = "Small teaching programs: ASCII ray casting, triangles, integer sequences, shapes, a phone registry, products and bookstores"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "geometry", "algorithms", "data processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
practica-render = "practica.render:main"
practica-triangles = "practica.triangles:main"
practica-spacetriangle = "practica.spacetriangle:main"
practica-sequences = "practica.sequences:main"
practica-sequences-v1 = "practica.sequences_v1:main"
practica-shapes = "practica.shapes:main"
practica-directory = "practica.directory:main"
practica-telephones = "practica.telephones:main"
practica-products = "practica.products:main"
practica-bookstore = "practica.bookstore:main"
practica-bookshop = "practica.bookshop:main"
practica-bookstore-manager = "practica.bookstore_manager:main"

[tool.hatch.build.targets.wheel]
packages = ["practica"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
