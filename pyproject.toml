[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchbook"
version = "0.1.0"
description = "Small animated drawing sketches: random boxes, a breathing spiral and an animated limit of 1/n"
requires-python = ">=3.10"
keywords = ["sketch", "animation", "pygame", "generative", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchbook = "sketchbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchbook"]

[tool.pytest.ini_options]
addopts = "-ra"
