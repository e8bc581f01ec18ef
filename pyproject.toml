[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubescene"
version = "0.1.0"
description = "A small OpenGL scene of textured cubes with a first-person camera"
requires-python = ">=3.10"
keywords = ["opengl", "3d", "camera", "scene", "pyglet", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: X11 Applications",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubescene = "cubescene.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubescene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
