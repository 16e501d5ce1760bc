[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "marioworld"
version = "0.1.0"
description = "Engine core for a 2D side-scrolling platformer: animation, camera, spatial-grid collision and debug overlay"
requires-python = ">=3.10"
dependencies = []
keywords = ["platformer", "game", "collision", "animation", "camera", "aabb", "spatial-grid"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["marioworld*"]

[tool.pytest.ini_options]
addopts = "-ra"
