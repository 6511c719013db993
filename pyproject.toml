[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gravharmonics"
version = "0.1.0"
description = "Fully-normalized associated Legendre functions, normalization constants and inclination functions for gravity field analysis"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = [
    "spherical harmonics",
    "legendre functions",
    "inclination functions",
    "geodesy",
    "gravity field",
    "orbit perturbations",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gravharmonics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
