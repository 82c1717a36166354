[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpnewton"
version = "0.1.0"
description = "Newton's method for a single equation and a 2x2 system in arbitrary-precision arithmetic"
requires-python = ">=3.10"
dependencies = ["mpmath"]
keywords = ["newton", "root-finding", "arbitrary-precision", "mpmath", "numerical-methods"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mpnewton-single = "mpnewton.newton:main"
mpnewton-system = "mpnewton.system:main"
mpnewton-examples = "mpnewton.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["mpnewton"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
