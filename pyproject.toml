[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "particlebox"
version = "0.1.0"
description = "A small 2D particle sandbox: bodies fall under gravity and bounce off the floor of a window."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["particles", "simulation", "physics", "pygame", "sandbox", "vectors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
particlebox = "particlebox.app:main"

[tool.hatch.build.targets.wheel]
packages = ["particlebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
