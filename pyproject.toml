[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritestack"
version = "1.0.0"
description = "Sprite stacking for paletted 8-bit sprites: layered objects, padding, rotation, ZX0 decompression and software rendering."
requires-python = ">=3.10"
dependencies = []
keywords = ["sprite", "sprite-stacking", "pseudo-3d", "graphics", "palette", "zx0"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spritestack-demo = "spritestack.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["spritestack"]

[tool.pytest.ini_options]
addopts = "-ra"
